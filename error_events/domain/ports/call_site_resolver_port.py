from __future__ import annotations

from abc import ABC, abstractmethod
from ..entities.call_site import CallSite


class CallSiteResolverPort(ABC):
    @abstractmethod
    def resolve(self, exception: BaseException) -> CallSite:
        raise NotImplementedError
