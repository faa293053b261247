"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El mismo modelo decodifica el documento externo y lo vuelve a producir.

Nota:
- Los nombres de campo son el contrato del wire; la única excepción es el tag,
  que viaja bajo la clave `type`.
- Todos los modelos son inmutables una vez decodificados.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.request_type import RequestType
from core.domain.types import Duration, Flag, Instant, ShardUrl, StreamId, Text, UInt32

_FROZEN = ConfigDict(frozen=True)


class PublicTariff(BaseModel):
    """Tarifa pública del stream (precio plano)."""

    model_config = _FROZEN

    id: UInt32 = Field(..., description="Identificador numérico de la tarifa.")
    price: UInt32 = Field(..., description="Precio entero de la tarifa.")
    duration: Duration = Field(
        ...,
        description="Periodo cubierto por el precio (gramática humantime, p.ej. '1h').",
    )
    description: Text = Field(..., description="Descripción libre.")


class PrivateTariff(BaseModel):
    """Tarifa privada (precio por cliente).

    Por qué un modelo distinto:
    - No tiene `id`; aunque se parezca a `PublicTariff`, el contrato es otro.
    """

    model_config = _FROZEN

    client_price: UInt32 = Field(..., description="Precio entero por cliente.")
    duration: Duration = Field(..., description="Periodo cubierto por el precio.")
    description: Text = Field(..., description="Descripción libre.")


class Stream(BaseModel):
    """Stream al que se refiere la notificación."""

    model_config = _FROZEN

    user_id: StreamId = Field(
        ...,
        description="UUID del usuario (forma canónica de 36 caracteres).",
    )
    is_private: Flag = Field(..., description="Indica si el stream es privado.")
    settings: UInt32 = Field(..., description="Máscara de bits opaca de ajustes (u32).")
    shard_url: ShardUrl = Field(
        ...,
        description="Endpoint del shard que sirve el stream (URL absoluta).",
    )
    public_tariff: PublicTariff
    private_tariff: PrivateTariff


class Gift(BaseModel):
    model_config = _FROZEN

    id: UInt32 = Field(..., description="Identificador numérico del regalo.")
    price: UInt32 = Field(..., description="Precio entero del regalo.")
    description: Text = Field(..., description="Descripción libre.")


class Debug(BaseModel):
    """Metadatos de depuración adjuntos a la petición."""

    model_config = _FROZEN

    duration: Duration = Field(
        ...,
        description="Tiempo de procesamiento (gramática humantime, p.ej. '234ms').",
    )
    at: Instant = Field(
        ...,
        description="Instante absoluto (RFC3339 con offset, normalizado a UTC).",
    )


class Request(BaseModel):
    """Agregado principal: una notificación de evento de stream.

    Por qué un agregado:
    - El documento se decodifica completo o no se decodifica (todo o nada);
      no existe un `Request` parcialmente poblado.
    """

    model_config = _FROZEN

    request_type: RequestType = Field(
        ...,
        alias="type",
        description="Resultado reportado ('success' | 'failure').",
    )
    stream: Stream
    gifts: tuple[Gift, ...] = Field(
        ...,
        description="Regalos asociados, en el orden del documento.",
    )
    debug: Debug
