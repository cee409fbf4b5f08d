from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class EventSinkPort(ABC):
    @abstractmethod
    async def send(self, payload: Dict[str, Any]) -> None:
        raise NotImplementedError
