"""Configuración de la aplicación.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El Core (modelos/codecs) no lee configuración: solo la CLI, el exportador
  JSON y el logging la consumen.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "STREAM_EVENTS_"
ENV_FILE = ".env"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        le=16,
        description="Indentación del JSON exportado (0 = una sola línea).",
    )
    json_sort_keys: bool = Field(
        default=False,
        description="Ordenar claves al exportar JSON.",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel mínimo de log (structlog).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como JSON (una línea por evento) en vez de consola.",
    )

    sample_document_path: Path | None = Field(
        default=None,
        description="Documento de ejemplo que `doctor` intenta decodificar.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value
