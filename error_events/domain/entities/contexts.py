from __future__ import annotations

import platform
import sys
from typing import Any, Dict
from pydantic import BaseModel, Field


class Contexts(BaseModel):
    """Named groups of situational data, e.g. ``os``, ``runtime``, ``app``."""

    groups: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def __getitem__(self, name: str) -> Dict[str, Any]:
        return self.groups.setdefault(name, {})

    def __contains__(self, name: str) -> bool:
        return name in self.groups

    def set(self, group: str, /, **values: Any) -> None:
        self.groups.setdefault(group, {}).update(values)

    def has_content(self) -> bool:
        return any(group for group in self.groups.values())

    def to_dict(self) -> dict:
        return {name: dict(group) for name, group in self.groups.items() if group}

    @classmethod
    def for_current_runtime(cls) -> "Contexts":
        os_info = {"name": platform.system(), "version": platform.release()}
        contexts = cls()
        contexts.set("os", **{k: v for k, v in os_info.items() if v})
        contexts.set(
            "runtime",
            name=platform.python_implementation(),
            version=platform.python_version(),
            build=sys.version,
        )
        return contexts
