import json
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest
from structlog.testing import capture_logs

from core.domain import Event, Request, RequestType
from core.errors import SchemaError
from core.services.request_codec import (
    decode_event,
    decode_request,
    dump_event,
    dump_request,
    encode_event,
    encode_request,
)


@pytest.mark.unit
def test_decode_fixture_document(request_document: str) -> None:
    request = decode_request(request_document)

    assert request.request_type is RequestType.SUCCESS

    stream = request.stream
    assert stream.user_id == UUID("8d234120-0bda-49b2-b7e0-fbd3912f6cbf")
    assert stream.is_private is False
    assert stream.settings == 45345
    assert stream.shard_url.host == "n3.example.com"
    assert str(stream.shard_url) == "https://n3.example.com/sapi"

    assert stream.public_tariff.id == 1
    assert stream.public_tariff.price == 100
    assert stream.public_tariff.duration == timedelta(seconds=3600)
    assert stream.public_tariff.description == "test public tariff"

    assert stream.private_tariff.client_price == 250
    assert stream.private_tariff.duration == timedelta(seconds=60)
    assert stream.private_tariff.description == "test private tariff"

    assert len(request.gifts) == 2
    assert [(g.id, g.price, g.description) for g in request.gifts] == [
        (1, 2, "Gift 1"),
        (2, 3, "Gift 2"),
    ]

    assert request.debug.duration == timedelta(milliseconds=234)
    assert request.debug.at == datetime(2019, 6, 28, 8, 35, 46, tzinfo=timezone.utc)


@pytest.mark.unit
def test_decode_accepts_text_bytes_and_mappings(request_document: str, request_payload: dict) -> None:
    from_text = decode_request(request_document)
    assert decode_request(request_document.encode("utf-8")) == from_text
    assert decode_request(request_payload) == from_text


@pytest.mark.unit
def test_encode_uses_wire_names_and_canonical_spellings(request_document: str) -> None:
    payload = encode_request(decode_request(request_document))

    assert payload["type"] == "success"
    assert "request_type" not in payload
    assert payload["stream"]["user_id"] == "8d234120-0bda-49b2-b7e0-fbd3912f6cbf"
    assert payload["stream"]["shard_url"] == "https://n3.example.com/sapi"
    assert payload["stream"]["public_tariff"]["duration"] == "1h"
    assert payload["stream"]["private_tariff"]["duration"] == "1m"
    assert payload["gifts"] == [
        {"id": 1, "price": 2, "description": "Gift 1"},
        {"id": 2, "price": 3, "description": "Gift 2"},
    ]
    assert payload["debug"] == {"duration": "234ms", "at": "2019-06-28T08:35:46Z"}


@pytest.mark.unit
def test_round_trip_preserves_every_field(request_document: str) -> None:
    request = decode_request(request_document)
    assert decode_request(encode_request(request)) == request
    assert decode_request(dump_request(request)) == request


@pytest.mark.unit
def test_round_trip_canonicalizes_equivalent_spellings(request_payload: dict) -> None:
    request_payload["stream"]["public_tariff"]["duration"] = "3600s"
    request_payload["debug"]["at"] = "2019-06-28T10:35:46+02:00"
    request = decode_request(request_payload)

    payload = encode_request(request)
    assert payload["stream"]["public_tariff"]["duration"] == "1h"
    assert payload["debug"]["at"] == "2019-06-28T08:35:46Z"
    assert decode_request(payload) == request


@pytest.mark.unit
def test_round_trip_of_constructed_failure_request(request_payload: dict) -> None:
    request_payload["type"] = "failure"
    request_payload["gifts"] = []
    request_payload["stream"]["is_private"] = True
    request = decode_request(request_payload)

    restored = decode_request(dump_request(request, indent=2))
    assert restored == request
    assert restored.request_type is RequestType.FAILURE
    assert restored.gifts == ()


@pytest.mark.unit
def test_dump_request_honours_formatting_options(request_document: str) -> None:
    request = decode_request(request_document)
    compact = dump_request(request)
    pretty = dump_request(request, indent=2, sort_keys=True)

    assert "\n" not in compact
    assert json.loads(pretty) == json.loads(compact)
    assert list(json.loads(pretty)) == ["debug", "gifts", "stream", "type"]


@pytest.mark.unit
def test_unknown_tag_raises_schema_error(request_payload: dict) -> None:
    request_payload["type"] = "unknown"
    with pytest.raises(SchemaError) as excinfo:
        decode_request(request_payload)
    assert excinfo.value.field == "type"


@pytest.mark.unit
def test_tag_under_its_attribute_name_is_not_accepted(request_payload: dict) -> None:
    request_payload["request_type"] = request_payload.pop("type")
    with pytest.raises(SchemaError) as excinfo:
        decode_request(request_payload)
    assert excinfo.value.field == "type"


@pytest.mark.unit
def test_invalid_shard_url_raises_schema_error(request_document: str) -> None:
    document = request_document.replace("https://n3.example.com/sapi", "not a url")
    with pytest.raises(SchemaError) as excinfo:
        decode_request(document)
    assert excinfo.value.field == "stream.shard_url"
    assert str(excinfo.value).startswith("stream.shard_url: ")


@pytest.mark.unit
def test_missing_field_reports_nested_path(request_payload: dict) -> None:
    del request_payload["stream"]["private_tariff"]["client_price"]
    with pytest.raises(SchemaError) as excinfo:
        decode_request(request_payload)
    assert excinfo.value.field == "stream.private_tariff.client_price"


@pytest.mark.unit
def test_gift_errors_carry_their_index(request_payload: dict) -> None:
    request_payload["gifts"][1]["price"] = "3"
    with pytest.raises(SchemaError) as excinfo:
        decode_request(request_payload)
    assert excinfo.value.field == "gifts.1.price"


@pytest.mark.unit
def test_duration_grammar_errors_surface_as_schema_error(request_payload: dict) -> None:
    request_payload["debug"]["duration"] = "234 parsecs"
    with pytest.raises(SchemaError) as excinfo:
        decode_request(request_payload)
    assert excinfo.value.field == "debug.duration"
    assert "invalid duration" in excinfo.value.message


@pytest.mark.unit
def test_all_errors_are_collected(request_payload: dict) -> None:
    request_payload["type"] = "pending"
    request_payload["stream"]["shard_url"] = "not a url"
    request_payload["debug"]["at"] = "yesterday"
    with pytest.raises(SchemaError) as excinfo:
        decode_request(request_payload)

    fields = [field for field, _ in excinfo.value.errors]
    assert fields == ["type", "stream.shard_url", "debug.at"]


@pytest.mark.unit
@pytest.mark.parametrize("document", ["[]", "42", '"success"', "{not json", ""])
def test_non_object_documents_raise_schema_error(document: str) -> None:
    with pytest.raises(SchemaError) as excinfo:
        decode_request(document)
    assert excinfo.value.errors


@pytest.mark.unit
def test_nested_non_object_raises_schema_error(request_payload: dict) -> None:
    request_payload["stream"] = ["not", "an", "object"]
    with pytest.raises(SchemaError) as excinfo:
        decode_request(request_payload)
    assert excinfo.value.field == "stream"


@pytest.mark.unit
def test_decode_failure_is_logged(request_payload: dict) -> None:
    request_payload["type"] = "unknown"
    with capture_logs() as logs:
        with pytest.raises(SchemaError):
            decode_request(request_payload)

    failures = [entry for entry in logs if entry["event"] == "document_decode_failed"]
    assert len(failures) == 1
    assert failures[0]["log_level"] == "warning"
    assert failures[0]["model"] == "Request"
    assert failures[0]["field"] == "type"


@pytest.mark.unit
def test_event_wire_format_round_trip() -> None:
    event = Event(name="Event 1", date="2024-11-14")

    encoded = dump_event(event)
    assert json.loads(encoded) == {"name": "Event 1", "date": "Date: 2024-11-14"}
    assert encode_event(event) == {"name": "Event 1", "date": "Date: 2024-11-14"}

    restored = decode_event(encoded)
    assert restored == event
    assert restored.date == "2024-11-14"


@pytest.mark.unit
def test_event_decode_tolerates_missing_prefix() -> None:
    assert decode_event('{"name": "Event 1", "date": "2024-11-14"}').date == "2024-11-14"


@pytest.mark.unit
def test_event_decode_errors_raise_schema_error() -> None:
    with pytest.raises(SchemaError) as excinfo:
        decode_event('{"name": "Event 1"}')
    assert excinfo.value.field == "date"
