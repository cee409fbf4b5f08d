from .entities import (
    UNAVAILABLE,
    CallSite,
    Contexts,
    DEFAULT_EVENT_DEFAULTS,
    EventDefaults,
    EventLevel,
    EventRecord,
    SdkVersion,
    User,
)
from .ports import CallSiteResolverPort, EventSinkPort, ModuleInventoryPort

__all__ = [
    "UNAVAILABLE",
    "CallSite",
    "Contexts",
    "DEFAULT_EVENT_DEFAULTS",
    "EventDefaults",
    "EventLevel",
    "EventRecord",
    "SdkVersion",
    "User",
    "CallSiteResolverPort",
    "EventSinkPort",
    "ModuleInventoryPort",
]
