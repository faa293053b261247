"""Codec de campo `"Date: "`.

Reglas:
- `encode_date` siempre antepone el prefijo.
- `decode_date` lo quita solo si aparece al inicio (una vez) y nunca falla:
  un valor sin prefijo se devuelve tal cual.
"""

from __future__ import annotations

DATE_PREFIX = "Date: "


def encode_date(raw: str) -> str:
    return f"{DATE_PREFIX}{raw}"


def decode_date(text: str) -> str:
    return text.removeprefix(DATE_PREFIX)
