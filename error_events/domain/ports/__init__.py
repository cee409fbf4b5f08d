from .call_site_resolver_port import CallSiteResolverPort
from .event_sink_port import EventSinkPort
from .module_inventory_port import ModuleInventoryPort

__all__ = [
    "CallSiteResolverPort",
    "EventSinkPort",
    "ModuleInventoryPort",
]
