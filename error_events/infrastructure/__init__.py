from .introspection import TracebackCallSiteResolver
from .inventory import SysModulesInventoryAdapter
from .sinks import JsonFileEventSink

__all__ = [
    "TracebackCallSiteResolver",
    "SysModulesInventoryAdapter",
    "JsonFileEventSink",
]
