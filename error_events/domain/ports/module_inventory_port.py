from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Tuple


class ModuleInventoryPort(ABC):
    @abstractmethod
    def loaded_modules(self) -> Iterable[Tuple[str, str]]:
        """Name and version of every loaded module that is backed by a file."""
        raise NotImplementedError
