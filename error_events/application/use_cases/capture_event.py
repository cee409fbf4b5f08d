from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Mapping

from ...domain.entities.contexts import Contexts
from ...domain.entities.event_defaults import EventDefaults
from ...domain.entities.event_record import EventRecord
from ...domain.entities.level import EventLevel
from ...domain.entities.user import User
from ...domain.ports.call_site_resolver_port import CallSiteResolverPort
from ...domain.ports.event_sink_port import EventSinkPort
from ...domain.ports.module_inventory_port import ModuleInventoryPort
from ...errors import EventSinkError
from ...infrastructure.introspection.traceback_resolver import TracebackCallSiteResolver
from ...infrastructure.inventory.sys_modules_adapter import SysModulesInventoryAdapter
from ...processing.encoder import OmissionAwareEncoder

if TYPE_CHECKING:
    from ...settings import Settings

logger = logging.getLogger(__name__)


class CaptureEventUseCase:
    def __init__(
        self,
        sink: EventSinkPort,
        *,
        defaults: EventDefaults | None = None,
        inventory: ModuleInventoryPort | None = None,
        resolver: CallSiteResolverPort | None = None,
        encoder: OmissionAwareEncoder | None = None,
        release: str | None = None,
        environment: str | None = None,
        server_name: str | None = None,
    ):
        self.sink = sink
        self.defaults = defaults
        self.inventory = inventory or SysModulesInventoryAdapter()
        self.resolver = resolver or TracebackCallSiteResolver()
        self.encoder = encoder or OmissionAwareEncoder()
        self.release = release
        self.environment = environment
        self.server_name = server_name

    @classmethod
    def from_settings(cls, sink: EventSinkPort, settings: "Settings", **kwargs) -> "CaptureEventUseCase":
        return cls(
            sink,
            defaults=settings.event_defaults(),
            release=settings.EVENTS_RELEASE,
            environment=settings.EVENTS_ENVIRONMENT,
            server_name=settings.EVENTS_SERVER_NAME,
            **kwargs,
        )

    def build(
        self,
        exception: BaseException | None = None,
        *,
        message: str | None = None,
        level: EventLevel | None = None,
        logger_name: str | None = None,
        tags: Mapping[str, object] | None = None,
        extra: Mapping[str, object] | None = None,
        fingerprint: Iterable[str] | None = None,
        user: User | None = None,
        contexts: Contexts | None = None,
    ) -> EventRecord:
        record = EventRecord.create(self.defaults)
        record.message = message
        record.logger_name = logger_name
        if level is None:
            level = EventLevel.ERROR if exception is not None else EventLevel.INFO
        record.level = level

        if exception is not None:
            record.populate(exception, inventory=self.inventory, resolver=self.resolver)

        for key, value in (tags or {}).items():
            record.set_tag(key, value)
        for key, value in (extra or {}).items():
            record.add_extra(key, value)
        if fingerprint is not None:
            record.set_fingerprint(fingerprint)
        if user is not None:
            record.set_user(user)
        if contexts is not None:
            record.set_contexts(contexts)

        record.release = self.release
        record.environment = self.environment
        record.server_name = self.server_name
        return record

    async def execute(self, exception: BaseException | None = None, **fields) -> str:
        record = self.build(exception, **fields)
        payload = self.encoder.encode(record)
        try:
            await self.sink.send(payload)
        except EventSinkError:
            logger.warning("Event %s could not be delivered", payload["event_id"], exc_info=True)
        return payload["event_id"]
