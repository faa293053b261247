"""Entidad `Event`: nombre + fecha envuelta con el codec `"Date: "`.

Independiente de `Request`; existe para mostrar cómo un campo concreto
sustituye la codificación de texto por defecto.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.types import Text, WrappedDate


class Event(BaseModel):
    """Nombre + fecha. La fecha se guarda siempre sin el prefijo `"Date: "`.

    El validador del campo corre también al construir en memoria:
    `Event(name=..., date="Date: x")` guarda `"x"` y se codifica como
    `"Date: x"`, nunca `"Date: Date: x"`.
    """

    model_config = ConfigDict(frozen=True)

    name: Text = Field(..., description="Nombre del evento.")
    date: WrappedDate = Field(
        ...,
        description="Fecha en texto libre; en el wire viaja como 'Date: <fecha>'.",
    )
