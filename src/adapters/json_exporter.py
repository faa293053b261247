"""Exportación JSON de documentos decodificados.

Por qué JSON:
- Es el formato del wire; exportar tras decodificar produce la forma canónica
  (duraciones humantime normalizadas, instantes en UTC).
"""

from __future__ import annotations

from pathlib import Path

from core.config import AppSettings
from core.domain.models import Request
from core.services.request_codec import dump_request


def render_request_json(*, request: Request, settings: AppSettings | None = None) -> str:
    """JSON UTF-8 con el formato configurado (indentación/orden de claves)."""

    settings = settings or AppSettings()
    indent = settings.json_indent or None
    return dump_request(request, indent=indent, sort_keys=settings.json_sort_keys) + "\n"


def export_request_json(
    *,
    request: Request,
    output_path: Path,
    settings: AppSettings | None = None,
) -> Path:
    """Exporta `Request` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_request_json(request=request, settings=settings), encoding="utf-8")
    return output_path
