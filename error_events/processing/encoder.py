from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..domain.entities.event_record import EventRecord


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _put(payload: Dict[str, Any], key: str, value: Optional[str]) -> None:
    if value:
        payload[key] = value


class OmissionAwareEncoder:
    """Turns an EventRecord into a JSON-ready dict.

    ``event_id``, ``timestamp`` and ``sdk`` are always written. Every other key
    is left out while its value is unset, an empty string, or an empty
    collection. Lazily created fields are only read through ``peek_*`` so
    encoding never materializes them.
    """

    def encode(self, record: EventRecord) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"event_id": record.id.hex}
        _put(payload, "message", record.message)
        payload["timestamp"] = format_timestamp(record.timestamp)
        _put(payload, "logger", record.logger_name)
        _put(payload, "platform", record.platform)
        payload["sdk"] = record.sdk_info.to_dict()
        if record.level is not None:
            payload["level"] = record.level.value
        _put(payload, "culprit", record.culprit)
        _put(payload, "server_name", record.server_name)
        _put(payload, "release", record.release)
        _put(payload, "environment", record.environment)

        contexts = record.peek_contexts()
        if contexts is not None and contexts.has_content():
            payload["contexts"] = contexts.to_dict()

        user = record.peek_user()
        if user is not None and user.has_content():
            payload["user"] = user.to_dict()

        tags = record.peek_tags()
        if tags:
            payload["tags"] = dict(tags)

        modules = record.peek_modules()
        if modules:
            payload["modules"] = dict(modules)

        extra = record.peek_extra()
        if extra:
            payload["extra"] = dict(extra)

        fingerprint = record.peek_fingerprint()
        if fingerprint:
            payload["fingerprint"] = list(fingerprint)

        return payload

    def dumps(self, record: EventRecord) -> str:
        return json.dumps(self.encode(record))


_encoder = OmissionAwareEncoder()


def encode_event(record: EventRecord) -> Dict[str, Any]:
    return _encoder.encode(record)


def dumps_event(record: EventRecord) -> str:
    return _encoder.dumps(record)
