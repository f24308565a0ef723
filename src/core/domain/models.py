"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar el Core
  a librerías de I/O.
- FastAPI reutiliza estos mismos modelos como contrato de respuesta.

Nota:
- Un cazador es opaco para el balanceador: solo se interpreta su identidad
  (ver `core.services.merge`). Por eso viaja como `dict`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

Record = dict[str, Any]


class HunterListing(BaseModel):
    """Vista unificada de `GET /cazadores`."""

    total: int = Field(
        ...,
        ge=0,
        description="Número de cazadores únicos tras deduplicar.",
    )
    cazadores: list[Record] = Field(
        default_factory=list,
        description="Cazadores fusionados, en orden de primera aparición.",
    )


class HunterSearch(BaseModel):
    """Resultado de `GET /cazadores/buscar`.

    `found=False` no distingue entre "no existe" y "todos los servicios
    fallaron": ambos casos llegan al cliente con el mismo mensaje.
    """

    found: bool = Field(
        ...,
        description="Indica si algún servicio encontró cazadores con ese nombre.",
    )
    total: int | None = Field(
        default=None,
        ge=0,
        description="Número de cazadores únicos encontrados (solo si found).",
    )
    cazadores: list[Record] | None = Field(
        default=None,
        description="Cazadores encontrados y deduplicados (solo si found).",
    )
    message: str | None = Field(
        default=None,
        description="Mensaje explicativo cuando no hay resultados.",
    )


class ServiceEcho(BaseModel):
    """Respuesta de un servicio a una escritura, con su procedencia."""

    servicio: str = Field(
        ...,
        min_length=1,
        description="Nombre del servicio que aplicó la escritura.",
    )
    respuesta: Any = Field(
        default=None,
        description="Eco del registro afectado tal como lo devolvió el servicio.",
    )


class WriteReport(BaseModel):
    """Resultado de `POST`/`PUT` sobre `/cazadores`."""

    message: str = Field(..., min_length=1)
    resultados: list[ServiceEcho] = Field(default_factory=list)


class DeleteReport(BaseModel):
    """Resultado de `DELETE /cazadores/{id}`."""

    message: str = Field(..., min_length=1)
    eliminados: list[ServiceEcho] = Field(default_factory=list)


class ErrorBody(BaseModel):
    """Cuerpo de error genérico devuelto al cliente."""

    error: str = Field(..., min_length=1)
