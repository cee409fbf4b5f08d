from __future__ import annotations

from typing import Optional
from pydantic import BaseModel


class SdkVersion(BaseModel):
    name: Optional[str] = None
    version: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "version": self.version}
