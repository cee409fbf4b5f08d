import json
from datetime import datetime, timezone

from error_events.domain.entities.contexts import Contexts
from error_events.domain.entities.event_record import EventRecord
from error_events.domain.entities.level import EventLevel
from error_events.processing.encoder import OmissionAwareEncoder, dumps_event, encode_event, format_timestamp

ALWAYS = {"event_id", "timestamp", "platform", "sdk"}


def test_bare_record_emits_only_required_keys():
    payload = encode_event(EventRecord())
    assert set(payload) == ALWAYS
    assert payload["sdk"] == {"name": "error-events", "version": payload["sdk"]["version"]}


def test_event_id_is_32_lowercase_hex():
    record = EventRecord()
    payload = encode_event(record)
    assert payload["event_id"] == record.id.hex
    assert len(payload["event_id"]) == 32
    assert "-" not in payload["event_id"]
    assert payload["event_id"] == payload["event_id"].lower()


def test_touched_but_empty_collections_are_omitted():
    record = EventRecord()
    record.get_or_create_tags()
    record.get_or_create_modules()
    record.get_or_create_extra()
    record.get_or_create_fingerprint()
    record.get_or_create_contexts()
    record.get_or_create_user()
    assert set(encode_event(record)) == ALWAYS


def test_empty_strings_are_omitted():
    record = EventRecord()
    record.message = ""
    record.platform = ""
    payload = encode_event(record)
    assert "message" not in payload
    assert "platform" not in payload
    assert {"event_id", "timestamp", "sdk"} <= set(payload)


def test_encoding_does_not_materialize():
    record = EventRecord()
    encode_event(record)
    assert record.peek_tags() is None
    assert record.peek_contexts() is None
    assert record.peek_user() is None


def test_level_uses_lowercase_name():
    record = EventRecord()
    record.level = EventLevel.WARNING
    assert encode_event(record)["level"] == "warning"


def test_timestamp_is_timezone_qualified():
    record = EventRecord()
    record.timestamp = datetime(2018, 4, 3, 17, 41, 36)
    assert encode_event(record)["timestamp"] == "2018-04-03T17:41:36+00:00"
    assert format_timestamp(datetime(2018, 4, 3, tzinfo=timezone.utc)) == "2018-04-03T00:00:00+00:00"


def test_fully_populated_record_keys_and_renames():
    record = EventRecord()
    record.message = "boom"
    record.logger_name = "app.worker"
    record.level = EventLevel.ERROR
    record.culprit = "app.Worker.run"
    record.server_name = "host-1"
    record.release = "1.2.3"
    record.environment = "staging"
    record.get_or_create_contexts().set("runtime", name="CPython", version="3.12.1")
    record.get_or_create_user().email = "dev@example.com"
    record.set_tag("region", "eu")
    record.get_or_create_modules()["pydantic"] = "2.7.0"
    record.add_extra("attempt", 2)
    record.get_or_create_fingerprint().extend(["{{ default }}", "db"])

    payload = encode_event(record)

    assert list(payload) == [
        "event_id",
        "message",
        "timestamp",
        "logger",
        "platform",
        "sdk",
        "level",
        "culprit",
        "server_name",
        "release",
        "environment",
        "contexts",
        "user",
        "tags",
        "modules",
        "extra",
        "fingerprint",
    ]
    assert payload["logger"] == "app.worker"
    assert payload["contexts"] == {"runtime": {"name": "CPython", "version": "3.12.1"}}
    assert payload["user"] == {"email": "dev@example.com"}
    assert payload["extra"] == {"attempt": "2"}
    assert payload["fingerprint"] == ["{{ default }}", "db"]


def test_output_does_not_alias_record():
    record = EventRecord()
    record.set_tag("a", "1")
    payload = encode_event(record)
    payload["tags"]["b"] = "2"
    assert record.peek_tags() == {"a": "1"}


def test_contexts_with_only_empty_groups_are_omitted():
    record = EventRecord()
    contexts = Contexts()
    contexts["os"]
    record.set_contexts(contexts)
    assert "contexts" not in encode_event(record)


def test_dumps_round_trip_key_set():
    record = EventRecord()
    record.message = "boom"
    record.set_tag("region", "eu")
    record.get_or_create_extra()

    text = OmissionAwareEncoder().dumps(record)
    decoded = json.loads(text)

    assert set(decoded) == ALWAYS | {"message", "tags"}
    assert decoded == json.loads(dumps_event(record))


def test_wire_form_comes_from_encoder_not_model_dump():
    record = EventRecord()
    record.set_tag("region", "eu")
    record.logger_name = "app"
    dumped = record.model_dump()
    payload = encode_event(record)
    assert "tags" not in dumped
    assert payload["tags"] == {"region": "eu"}
    assert payload["logger"] == "app"
