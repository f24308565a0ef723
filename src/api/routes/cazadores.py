"""
Cazadores API Routes.

Unifica los servicios de Mongo y Postgres bajo un único recurso. Cada ruta
delega en `HuntersGateway`; los errores agregados llegan como `GatewayError`
y los renderiza el handler registrado en `api.main`.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request

from core.domain.models import DeleteReport, ErrorBody, HunterListing, HunterSearch, WriteReport
from core.services.hunters_gateway import HuntersGateway

logger = logging.getLogger(__name__)
router = APIRouter()


def get_gateway(request: Request) -> HuntersGateway:
    """Gateway compartido, creado en el lifespan de la app."""
    return request.app.state.gateway


@router.get(
    "/cazadores",
    response_model=HunterListing,
    summary="Obtiene todos los cazadores desde Mongo y Postgres",
    responses={502: {"model": ErrorBody, "description": "Ningún servicio respondió"}},
)
async def list_cazadores(gateway: HuntersGateway = Depends(get_gateway)):
    """Lista combinada y deduplicada de cazadores."""
    return await gateway.list_hunters()


@router.get(
    "/cazadores/buscar",
    response_model=HunterSearch,
    response_model_exclude_none=True,
    summary="Busca un cazador en ambos servicios",
    responses={400: {"model": ErrorBody, "description": "Falta el parámetro nombre"}},
)
async def buscar_cazador(
    nombre: str | None = Query(default=None, description="Nombre del cazador a buscar"),
    gateway: HuntersGateway = Depends(get_gateway),
):
    """Resultado combinado; `found: false` si ningún servicio lo encontró."""
    return await gateway.search(nombre)


@router.post(
    "/cazadores",
    response_model=WriteReport,
    summary="Crea un cazador en ambos servicios",
    responses={502: {"model": ErrorBody, "description": "Ningún servicio aceptó el alta"}},
)
async def crear_cazador(
    body: dict[str, Any] = Body(...),
    gateway: HuntersGateway = Depends(get_gateway),
):
    return await gateway.create(body)


@router.put(
    "/cazadores/{cazador_id}",
    response_model=WriteReport,
    summary="Actualiza un cazador en ambos servicios",
    responses={404: {"model": ErrorBody, "description": "Ningún servicio tiene ese id"}},
)
async def actualizar_cazador(
    cazador_id: str,
    body: dict[str, Any] = Body(...),
    gateway: HuntersGateway = Depends(get_gateway),
):
    return await gateway.update(cazador_id, body)


@router.delete(
    "/cazadores/{cazador_id}",
    response_model=DeleteReport,
    summary="Elimina un cazador de ambos servicios",
    responses={404: {"model": ErrorBody, "description": "Ningún servicio tiene ese id"}},
)
async def eliminar_cazador(
    cazador_id: str,
    gateway: HuntersGateway = Depends(get_gateway),
):
    return await gateway.delete(cazador_id)
