"""Logging estructurado (structlog sobre logging de la stdlib).

Por qué structlog:
- Eventos con nombre y pares clave/valor (`document_decode_failed`, `field=...`)
  en vez de mensajes libres; el mismo evento se puede renderizar para consola
  o como JSON.

Los loggers envuelven siempre un `logging.Logger`: si la aplicación anfitriona
no llama a `configure_logging`, rigen los defaults de la stdlib (WARNING, a
stderr) y nada se escribe en stdout.
"""

from __future__ import annotations

import logging
import sys

import structlog

from core.config import AppSettings

HANDLER_NAME = "stream-events"

_configured = False


class _StderrHandler(logging.StreamHandler):
    """Escribe en el `sys.stderr` vigente (la CLI y los tests lo sustituyen)."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def configure_logging(settings: AppSettings | None = None, *, force: bool = False) -> None:
    """Configura structlog + handler raíz una sola vez (idempotente salvo `force=True`)."""

    global _configured
    if _configured and not force:
        return

    settings = settings or AppSettings()

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    handler = _StderrHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if settings.log_json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger perezoso sobre `logging.getLogger(name)`."""

    return structlog.wrap_logger(logging.getLogger(name))
