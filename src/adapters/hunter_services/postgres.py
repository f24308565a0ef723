"""Servicio de cazadores respaldado por Postgres."""

from __future__ import annotations

import httpx

from adapters.hunter_services.rest import RestHunterService
from core.config import AppSettings


class PostgresHunterService(RestHunterService):
    network_name = "postgres"

    def __init__(self, settings: AppSettings, *, client: httpx.AsyncClient) -> None:
        super().__init__(name=self.network_name, base_url=settings.pg_service_url, client=client)
