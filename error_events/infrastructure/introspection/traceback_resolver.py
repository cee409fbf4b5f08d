from __future__ import annotations

from types import FrameType
from typing import Optional

from ...domain.entities.call_site import CallSite
from ...domain.ports.call_site_resolver_port import CallSiteResolverPort


class TracebackCallSiteResolver(CallSiteResolverPort):
    """Resolves the frame that raised an exception.

    The method is the function name of the innermost traceback frame. The type
    is ``<module>.<Class>`` when that function is defined on a class, and unknown
    for plain functions. An exception that was never raised has no traceback,
    so both parts are unknown.
    """

    def resolve(self, exception: BaseException) -> CallSite:
        tb = exception.__traceback__
        if tb is None:
            return CallSite()
        while tb.tb_next is not None:
            tb = tb.tb_next
        frame = tb.tb_frame
        method_name = frame.f_code.co_name
        if method_name == "<module>":
            method_name = None
        return CallSite(type_name=self._declaring_type(frame), method_name=method_name)

    @staticmethod
    def _declaring_type(frame: FrameType) -> Optional[str]:
        code = frame.f_code
        qualname = getattr(code, "co_qualname", None)
        if qualname is not None:
            owner, _, _ = qualname.rpartition(".")
            if not owner or owner.endswith("<locals>"):
                return None
            module = frame.f_globals.get("__name__")
            return f"{module}.{owner}" if module else owner

        # co_qualname is 3.11+; fall back to the bound instance or class.
        if not code.co_argcount or code.co_varnames[0] not in ("self", "cls"):
            return None
        bound = frame.f_locals.get(code.co_varnames[0])
        if bound is None:
            return None
        cls = bound if isinstance(bound, type) else type(bound)
        return f"{cls.__module__}.{cls.__qualname__}"
