"""Tipos de hoja reutilizables (Pydantic v2 `Annotated`).

Por qué aquí:
- Cada tipo concentra su gramática textual (UUID canónico, URL absoluta,
  duración humantime, instante RFC3339) en un solo lugar.
- Los modelos solo declaran *qué* campo es, no *cómo* se parsea.

Nota:
- Los escalares son estrictos: un `u32` no acepta `"45345"` ni `45345.0`.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any
from uuid import UUID

from pydantic import AfterValidator, AnyUrl, BeforeValidator, Field, PlainSerializer

from core.codecs.date_wrap import decode_date, encode_date
from core.codecs.humantime import format_duration, parse_duration

U32_MAX = 0xFFFF_FFFF

_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_RFC3339_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})"
)


def _canonical_uuid(value: Any) -> Any:
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str) or _UUID_RE.fullmatch(value) is None:
        raise ValueError("expected a UUID in 36-character hyphenated form")
    return UUID(value)


def _require_host(value: AnyUrl) -> AnyUrl:
    if not value.host:
        raise ValueError("URL must be absolute with a host")
    return value


def _duration_from_text(value: Any) -> Any:
    if isinstance(value, timedelta):
        return value
    return parse_duration(value)


def _rfc3339_text(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or _RFC3339_RE.fullmatch(value) is None:
        raise ValueError("expected an RFC3339 timestamp with a UTC offset")
    return value


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("timestamp must carry a UTC offset")
    return value.astimezone(timezone.utc)


def format_instant(value: datetime) -> str:
    """RFC3339 en UTC con sufijo `Z`."""

    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


UInt32 = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]
Flag = Annotated[bool, Field(strict=True)]
Text = Annotated[str, Field(strict=True)]

StreamId = Annotated[UUID, BeforeValidator(_canonical_uuid)]

ShardUrl = Annotated[AnyUrl, AfterValidator(_require_host)]

Duration = Annotated[
    timedelta,
    BeforeValidator(_duration_from_text),
    PlainSerializer(format_duration, return_type=str, when_used="json"),
]

Instant = Annotated[
    datetime,
    BeforeValidator(_rfc3339_text),
    AfterValidator(_to_utc),
    PlainSerializer(format_instant, return_type=str, when_used="json"),
]

# Override por campo: el codec `"Date: "` sustituye al manejo de str por defecto.
WrappedDate = Annotated[
    str,
    Field(strict=True),
    AfterValidator(decode_date),
    PlainSerializer(encode_date, return_type=str),
]
