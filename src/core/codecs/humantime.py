"""Human-friendly duration grammar ("humantime" style).

A duration is one or more ``<integer><unit>`` tokens, optionally separated by
whitespace, whose values are summed: ``"1h"``, ``"234ms"``, ``"1h 30m"``,
``"2days 4h"``. Units are case-sensitive (``m`` is minutes, ``M`` is months).

Resolution is one microsecond, the resolution of ``datetime.timedelta``;
nanosecond tokens are accepted and truncated.
"""

from __future__ import annotations

import re
from datetime import timedelta

_US = 1
_MS = 1_000
_SECOND = 1_000_000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 2_630_016 * _SECOND  # 30.44 days
_YEAR = 31_557_600 * _SECOND  # 365.25 days

# Valores en microsegundos; "ns" se resuelve aparte.
_UNITS: dict[str, int] = {
    "us": _US,
    "usec": _US,
    "µs": _US,
    "ms": _MS,
    "msec": _MS,
    "millis": _MS,
    "s": _SECOND,
    "sec": _SECOND,
    "secs": _SECOND,
    "second": _SECOND,
    "seconds": _SECOND,
    "m": _MINUTE,
    "min": _MINUTE,
    "mins": _MINUTE,
    "minute": _MINUTE,
    "minutes": _MINUTE,
    "h": _HOUR,
    "hr": _HOUR,
    "hrs": _HOUR,
    "hour": _HOUR,
    "hours": _HOUR,
    "d": _DAY,
    "day": _DAY,
    "days": _DAY,
    "w": _WEEK,
    "week": _WEEK,
    "weeks": _WEEK,
    "M": _MONTH,
    "month": _MONTH,
    "months": _MONTH,
    "y": _YEAR,
    "year": _YEAR,
    "years": _YEAR,
}

_NANO_UNITS = frozenset({"ns", "nsec"})

_TOKEN_RE = re.compile(r"\s*([0-9]+)([^0-9\s]+)")

# Orden de salida del formato canónico.
_FORMAT_UNITS: tuple[tuple[str, int], ...] = (
    ("d", _DAY),
    ("h", _HOUR),
    ("m", _MINUTE),
    ("s", _SECOND),
    ("ms", _MS),
    ("us", _US),
)


class DurationError(ValueError):
    """Raised when a duration string does not follow the grammar."""


def parse_duration(text: str) -> timedelta:
    """Parse ``text`` into a ``timedelta``.

    Raises ``DurationError`` for empty input, bare numbers, unknown units,
    signs, decimals or trailing garbage.
    """

    if not isinstance(text, str):
        raise DurationError(f"expected a duration string, got {type(text).__name__}")

    source = text.strip()
    if not source:
        raise DurationError("empty duration string")

    total_us = 0
    nanos = 0
    pos = 0
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise DurationError(f"invalid duration {text!r} at position {pos}")
        magnitude = int(match.group(1))
        unit = match.group(2)
        if unit in _NANO_UNITS:
            nanos += magnitude
        elif unit in _UNITS:
            total_us += magnitude * _UNITS[unit]
        else:
            raise DurationError(f"unknown time unit {unit!r} in duration {text!r}")
        pos = match.end()

    total_us += nanos // 1_000
    try:
        return timedelta(microseconds=total_us)
    except OverflowError:
        raise DurationError(f"duration {text!r} is out of range") from None


def format_duration(value: timedelta) -> str:
    """Render ``value`` in canonical form (``"1h"``, ``"1m 30s"``, ``"0s"``)."""

    total_us = (value.days * 86_400 + value.seconds) * _SECOND + value.microseconds
    if total_us < 0:
        raise DurationError("negative durations cannot be formatted")
    if total_us == 0:
        return "0s"

    parts: list[str] = []
    remaining = total_us
    for suffix, size in _FORMAT_UNITS:
        amount, remaining = divmod(remaining, size)
        if amount:
            parts.append(f"{amount}{suffix}")
    return " ".join(parts)
