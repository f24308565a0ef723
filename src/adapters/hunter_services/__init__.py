"""Servicios de cazadores (clientes concretos).

Por qué un paquete:
- Agrupa un módulo por servicio aguas arriba.
- Cada módulo implementa `core.interfaces.hunter_service.HunterService`.
"""

from __future__ import annotations

import httpx

from adapters.hunter_services.mongo import MongoHunterService
from adapters.hunter_services.postgres import PostgresHunterService
from adapters.hunter_services.rest import RestHunterService
from core.config import AppSettings

# El orden importa: el último servicio gana los empates al fusionar.
_SERVICES = (
    MongoHunterService,
    PostgresHunterService,
)


def build_hunter_services(
    settings: AppSettings,
    *,
    client: httpx.AsyncClient,
) -> list[RestHunterService]:
    return [service(settings, client=client) for service in _SERVICES]


__all__ = [
    "MongoHunterService",
    "PostgresHunterService",
    "RestHunterService",
    "build_hunter_services",
]
