from .traceback_resolver import TracebackCallSiteResolver

__all__ = ["TracebackCallSiteResolver"]
