"""Errores del Core.

Por qué un único tipo:
- Toda falla de decodificación (campo ausente, forma incorrecta, escalar
  imparseable) se reporta al llamador con la misma excepción.
- La CLI y los tests solo necesitan conocer `SchemaError`, no los detalles
  internos de pydantic.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import ValidationError

_DEFAULT_MESSAGE = "document does not match the schema"


class SchemaError(ValueError):
    """El documento no se ajusta al esquema; no hay resultado parcial.

    Atributos:
    - `message`: descripción del primer error.
    - `field`: ruta con puntos del primer campo fallido (`stream.shard_url`),
      o `None` si el error es a nivel de documento.
    - `errors`: todas las parejas `(field, message)` reportadas.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        errors: Sequence[tuple[str | None, str]] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors: tuple[tuple[str | None, str], ...] = tuple(errors) or ((field, message),)

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> SchemaError:
        """Traduce un `ValidationError` de pydantic preservando rutas y mensajes."""

        collected: list[tuple[str | None, str]] = []
        for item in exc.errors(include_url=False):
            collected.append((_format_loc(item.get("loc")), _format_msg(item)))
        if not collected:
            return cls(_DEFAULT_MESSAGE)
        field, message = collected[0]
        return cls(message, field=field, errors=collected)


def _format_loc(loc: object) -> str | None:
    if not isinstance(loc, tuple) or not loc:
        return None
    return ".".join(str(part) for part in loc)


def _format_msg(item: dict) -> str:
    # Los ValueError lanzados por validadores propios llegan en ctx["error"].
    ctx = item.get("ctx")
    if isinstance(ctx, dict):
        raw_error = ctx.get("error")
        if isinstance(raw_error, BaseException) and str(raw_error):
            return str(raw_error)

    msg = item.get("msg")
    if isinstance(msg, str) and msg.strip():
        return msg
    return _DEFAULT_MESSAGE
