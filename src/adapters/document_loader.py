"""Carga de documentos de petición desde disco o stdin.

Por qué en adapters:
- La lectura es I/O de una sola vez; el Core recibe los bytes crudos y
  valida él mismo la codificación UTF-8 (un fallo es un SchemaError).
- `-` como ruta significa stdin (convención de CLI).
"""

from __future__ import annotations

import sys
from pathlib import Path

from core.domain.event import Event
from core.domain.models import Request
from core.services.request_codec import decode_event, decode_request

STDIN_MARKER = "-"


def read_document(path: Path | str) -> bytes:
    if str(path) == STDIN_MARKER:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def load_request(path: Path | str) -> Request:
    return decode_request(read_document(path))


def load_event(path: Path | str) -> Event:
    return decode_event(read_document(path))
