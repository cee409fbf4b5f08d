__version__ = "0.1.0"

import logging

from .domain import (
    CallSite,
    Contexts,
    EventDefaults,
    EventLevel,
    EventRecord,
    SdkVersion,
    User,
)
from .errors import ErrorEventsError, EventSinkError
from .processing.encoder import OmissionAwareEncoder, dumps_event, encode_event

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "CallSite",
    "Contexts",
    "EventDefaults",
    "EventLevel",
    "EventRecord",
    "SdkVersion",
    "User",
    "ErrorEventsError",
    "EventSinkError",
    "OmissionAwareEncoder",
    "dumps_event",
    "encode_event",
]
