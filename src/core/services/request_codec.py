"""Decode/encode entry points for request and event documents.

Every caller (CLI, adapters, tests) goes through these helpers instead of
calling pydantic directly, so that:

- decoding is all-or-nothing and every failure surfaces as ``SchemaError``;
- encoding always uses wire names (``type`` instead of ``request_type``) and
  the canonical duration/timestamp spellings.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.domain.event import Event
from core.domain.models import Request
from core.errors import SchemaError
from core.logging_config import get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)

Document = str | bytes | bytearray | Mapping[str, Any]

logger = get_logger(__name__)


def _validate(model: type[ModelT], document: Document) -> ModelT:
    try:
        if isinstance(document, (str, bytes, bytearray)):
            return model.model_validate_json(document)
        if isinstance(document, Mapping) and not isinstance(document, dict):
            document = dict(document)
        return model.model_validate(document)
    except ValidationError as exc:
        error = SchemaError.from_validation_error(exc)
        logger.warning(
            "document_decode_failed",
            model=model.__name__,
            field=error.field,
            error=error.message,
            error_count=len(error.errors),
        )
        raise error from None


def decode_request(document: Document) -> Request:
    """Decode a request document (JSON text or parsed mapping).

    Raises ``SchemaError`` when a field is missing, has the wrong shape or
    holds an unparseable scalar.
    """

    request = _validate(Request, document)
    logger.debug(
        "request_decoded",
        request_type=request.request_type.value,
        user_id=str(request.stream.user_id),
        gifts=len(request.gifts),
    )
    return request


def encode_request(request: Request) -> dict[str, Any]:
    """JSON-compatible mapping keyed by wire names."""

    return request.model_dump(mode="json", by_alias=True)


def dump_request(request: Request, *, indent: int | None = None, sort_keys: bool = False) -> str:
    return json.dumps(encode_request(request), ensure_ascii=False, indent=indent, sort_keys=sort_keys)


def decode_event(document: Document) -> Event:
    """Decode an event document; the ``date`` prefix is stripped if present."""

    return _validate(Event, document)


def encode_event(event: Event) -> dict[str, Any]:
    return event.model_dump(mode="json")


def dump_event(event: Event, *, indent: int | None = None) -> str:
    return json.dumps(encode_event(event), ensure_ascii=False, indent=indent)
