from __future__ import annotations

from typing import Dict, Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    id: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    ip_address: Optional[str] = None
    data: Dict[str, str] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        payload = {}
        for key in ("id", "username", "email", "ip_address"):
            value = getattr(self, key)
            if value:
                payload[key] = value
        if self.data:
            payload["data"] = dict(self.data)
        return payload

    def has_content(self) -> bool:
        return bool(self.id or self.username or self.email or self.ip_address or self.data)
