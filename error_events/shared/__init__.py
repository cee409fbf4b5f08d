from .log__shared_util import HANDLER_NAME, configure_logging, resolve_level

__all__ = ["HANDLER_NAME", "configure_logging", "resolve_level"]
