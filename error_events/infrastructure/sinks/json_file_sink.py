from __future__ import annotations

import asyncio
import json
import logging
import aiofiles
from pathlib import Path
from typing import Any, Dict, List

from ...domain.ports.event_sink_port import EventSinkPort
from ...errors import EventSinkError

logger = logging.getLogger(__name__)


class JsonFileEventSink(EventSinkPort):
    """Keeps encoded events in a local JSON array file."""

    def __init__(self, store_path: str):
        self.path = Path(store_path)
        self._lock = asyncio.Lock()
        self._ensure_store()

    def _ensure_store(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump([], f)

    async def read_all(self) -> List[Dict[str, Any]]:
        async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
            content = await f.read()
        return json.loads(content) if content else []

    async def send(self, payload: Dict[str, Any]) -> None:
        async with self._lock:
            try:
                self._ensure_store()
                events = await self.read_all()
                events.append(payload)
                async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                    await f.write(json.dumps(events, indent=2))
            except (OSError, ValueError) as e:
                raise EventSinkError(f"Could not store event in {self.path}: {e}") from e
        logger.debug("Stored event %s in %s", payload.get("event_id"), self.path)
