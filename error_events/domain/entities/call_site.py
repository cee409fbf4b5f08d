from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict

UNAVAILABLE = "<unavailable>"


class CallSite(BaseModel):
    """Where an exception was raised. Either part may be unknown on its own."""

    model_config = ConfigDict(frozen=True)

    type_name: Optional[str] = None
    method_name: Optional[str] = None

    def describe(self) -> str:
        return f"{self.type_name or UNAVAILABLE}.{self.method_name or UNAVAILABLE}"
