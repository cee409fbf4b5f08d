from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .call_site import CallSite
from .contexts import Contexts
from .event_defaults import DEFAULT_EVENT_DEFAULTS, EventDefaults
from .level import EventLevel
from .sdk_version import SdkVersion
from .user import User

if TYPE_CHECKING:
    from ..ports.call_site_resolver_port import CallSiteResolverPort
    from ..ports.module_inventory_port import ModuleInventoryPort

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventRecord(BaseModel):
    """A single reported error or message.

    Collections and the ``contexts``/``user`` sub-objects start out absent and
    are only created through their ``get_or_create_*`` accessors. ``peek_*``
    reads them without creating anything, which is what the encoder relies on
    to leave untouched fields out of the payload.

    The wire form is produced by ``encode_event`` / ``dumps_event``.
    ``model_dump`` only covers the scalar attributes under their Python names
    and is not a substitute for it.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=_utc_now)
    message: Optional[str] = None
    logger_name: Optional[str] = None
    platform: Optional[str] = DEFAULT_EVENT_DEFAULTS.platform
    sdk_info: SdkVersion = Field(default_factory=DEFAULT_EVENT_DEFAULTS.sdk_info)
    level: Optional[EventLevel] = None
    culprit: Optional[str] = None
    server_name: Optional[str] = None
    release: Optional[str] = None
    environment: Optional[str] = None

    _contexts: Optional[Contexts] = PrivateAttr(default=None)
    _user: Optional[User] = PrivateAttr(default=None)
    _tags: Optional[Dict[str, str]] = PrivateAttr(default=None)
    _modules: Optional[Dict[str, str]] = PrivateAttr(default=None)
    _extra: Optional[Dict[str, str]] = PrivateAttr(default=None)
    _fingerprint: Optional[List[str]] = PrivateAttr(default=None)

    @classmethod
    def create(cls, defaults: EventDefaults | None = None) -> "EventRecord":
        record = cls()
        if defaults is not None:
            record.reset(defaults)
        return record

    @classmethod
    def from_exception(
        cls,
        exception: BaseException,
        *,
        defaults: EventDefaults | None = None,
        inventory: "ModuleInventoryPort",
        resolver: "CallSiteResolverPort",
    ) -> "EventRecord":
        record = cls.create(defaults)
        record.populate(exception, inventory=inventory, resolver=resolver)
        return record

    def reset(self, defaults: EventDefaults | None = None) -> "EventRecord":
        """Give the record a fresh identity and timestamp.

        Platform and SDK name/version are re-applied from ``defaults``. Optional
        fields and collections set by the caller are kept.
        """
        defaults = defaults or DEFAULT_EVENT_DEFAULTS
        self.id = uuid4()
        self.timestamp = _utc_now()
        self.platform = defaults.platform
        self.sdk_info.name = defaults.sdk_name
        self.sdk_info.version = defaults.sdk_version
        return self

    def populate(
        self,
        exception: BaseException,
        *,
        inventory: "ModuleInventoryPort",
        resolver: "CallSiteResolverPort",
    ) -> "EventRecord":
        """Fill message, culprit and modules from ``exception``.

        Message and culprit are only set when absent. Modules are always
        refreshed from the inventory, overwriting entries with the same name.
        """
        if self.message is None:
            self.message = str(exception) or type(exception).__name__

        if self.culprit is None:
            self.culprit = self._call_site(exception, resolver).describe()

        modules = self.get_or_create_modules()
        for name, version in inventory.loaded_modules():
            modules[name] = version
        return self

    @staticmethod
    def _call_site(exception: BaseException, resolver: "CallSiteResolverPort") -> CallSite:
        try:
            return resolver.resolve(exception)
        except Exception:
            logger.debug("Could not resolve call site for %r", exception, exc_info=True)
            return CallSite()

    def get_or_create_contexts(self) -> Contexts:
        if self._contexts is None:
            self._contexts = Contexts()
        return self._contexts

    def peek_contexts(self) -> Optional[Contexts]:
        return self._contexts

    def set_contexts(self, contexts: Contexts | None) -> None:
        self._contexts = contexts

    def get_or_create_user(self) -> User:
        if self._user is None:
            self._user = User()
        return self._user

    def peek_user(self) -> Optional[User]:
        return self._user

    def set_user(self, user: User | None) -> None:
        self._user = user

    def get_or_create_tags(self) -> Dict[str, str]:
        if self._tags is None:
            self._tags = {}
        return self._tags

    def peek_tags(self) -> Optional[Dict[str, str]]:
        return self._tags

    def set_tags(self, tags: Mapping[str, str] | None) -> None:
        self._tags = None if tags is None else dict(tags)

    def set_tag(self, key: str, value: object) -> None:
        self.get_or_create_tags()[key] = str(value)

    def get_or_create_modules(self) -> Dict[str, str]:
        if self._modules is None:
            self._modules = {}
        return self._modules

    def peek_modules(self) -> Optional[Dict[str, str]]:
        return self._modules

    def set_modules(self, modules: Mapping[str, str] | None) -> None:
        self._modules = None if modules is None else dict(modules)

    def get_or_create_extra(self) -> Dict[str, str]:
        if self._extra is None:
            self._extra = {}
        return self._extra

    def peek_extra(self) -> Optional[Dict[str, str]]:
        return self._extra

    def set_extra(self, extra: Mapping[str, str] | None) -> None:
        self._extra = None if extra is None else dict(extra)

    def add_extra(self, key: str, value: object) -> None:
        self.get_or_create_extra()[key] = str(value)

    def get_or_create_fingerprint(self) -> List[str]:
        if self._fingerprint is None:
            self._fingerprint = []
        return self._fingerprint

    def peek_fingerprint(self) -> Optional[List[str]]:
        return self._fingerprint

    def set_fingerprint(self, fingerprint: Iterable[str] | None) -> None:
        self._fingerprint = None if fingerprint is None else list(fingerprint)
