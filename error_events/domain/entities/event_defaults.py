from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ... import __version__
from .sdk_version import SdkVersion


class EventDefaults(BaseModel):
    """Values an event receives on construction and on every reset."""

    model_config = ConfigDict(frozen=True)

    platform: str = "python"
    sdk_name: str = "error-events"
    sdk_version: str = __version__

    def sdk_info(self) -> SdkVersion:
        return SdkVersion(name=self.sdk_name, version=self.sdk_version)


DEFAULT_EVENT_DEFAULTS = EventDefaults()
