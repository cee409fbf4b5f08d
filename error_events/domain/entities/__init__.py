from .call_site import UNAVAILABLE, CallSite
from .contexts import Contexts
from .event_defaults import DEFAULT_EVENT_DEFAULTS, EventDefaults
from .event_record import EventRecord
from .level import EventLevel
from .sdk_version import SdkVersion
from .user import User

__all__ = [
    "UNAVAILABLE",
    "CallSite",
    "Contexts",
    "DEFAULT_EVENT_DEFAULTS",
    "EventDefaults",
    "EventRecord",
    "EventLevel",
    "SdkVersion",
    "User",
]
