"""Codecs de campo (funciones puras encode/decode).

Por qué separados del dominio:
- Son transformaciones de texto sin estado que los modelos enganchan campo a
  campo; se pueden testear y reutilizar sin construir un modelo completo.
"""

from core.codecs.date_wrap import DATE_PREFIX, decode_date, encode_date
from core.codecs.humantime import DurationError, format_duration, parse_duration

__all__ = [
    "DATE_PREFIX",
    "DurationError",
    "decode_date",
    "encode_date",
    "format_duration",
    "parse_duration",
]
