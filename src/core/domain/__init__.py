"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce archivos, CLI ni logging: solo conceptos del problema.
"""

from core.domain.event import Event
from core.domain.models import Debug, Gift, PrivateTariff, PublicTariff, Request, Stream
from core.domain.request_type import RequestType

__all__ = [
    "Debug",
    "Event",
    "Gift",
    "PrivateTariff",
    "PublicTariff",
    "Request",
    "RequestType",
    "Stream",
]
