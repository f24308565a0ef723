"""Orquestación del balanceador de cazadores.

Este módulo une las tres piezas del protocolo (fan-out, normalización y
fusión) detrás de una operación por ruta. La capa web solo traduce HTTP a
estas llamadas y los `GatewayError` a respuestas de error; no conoce a los
servicios concretos.

Lecturas (`list_hunters`, `search`): se fusionan y deduplican.
Escrituras (`create`, `update`, `delete`): cada servicio se modifica por su
cuenta, sin compensación. Basta un éxito para responder como éxito (parcial
o total) con el eco de cada servicio que aceptó la escritura.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from core.domain.models import DeleteReport, HunterListing, HunterSearch, ServiceEcho, WriteReport
from core.domain.operations import HunterOperation
from core.domain.outcomes import BackendOutcome, successes
from core.errors import AllBackendsFailedError, NotFoundInAnyBackendError
from core.interfaces.hunter_service import HunterService
from core.services.fanout import fan_out
from core.services.merge import DEFAULT_IDENTITY_FIELDS, merge_by_identity
from core.services.normalizer import normalize_list, normalize_search, normalize_write

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Cazador no encontrado en ninguno"
NOT_FOUND_ANY_MESSAGE = "Cazador no encontrado en ningún servicio"


class HuntersGateway:
    """Vista única de `cazadores` sobre N servicios independientes."""

    def __init__(
        self,
        services: Sequence[HunterService],
        *,
        identity_fields: Sequence[str] = DEFAULT_IDENTITY_FIELDS,
    ) -> None:
        if not services:
            raise ValueError("HuntersGateway necesita al menos un servicio")
        self._services = list(services)
        self._identity_fields = tuple(identity_fields)

    @property
    def service_names(self) -> list[str]:
        return [service.name for service in self._services]

    async def _dispatch(self, operation: HunterOperation) -> list[BackendOutcome]:
        return await fan_out(self._services, operation)

    async def list_hunters(self) -> HunterListing:
        outcomes = await self._dispatch(HunterOperation.list())
        ok = successes(outcomes)
        if not ok:
            logger.error("Ningún servicio respondió a list (%d consultados)", len(outcomes))
            raise AllBackendsFailedError("Error al obtener datos de los servicios")

        cazadores = merge_by_identity((normalize_list(o) for o in ok), self._identity_fields)
        return HunterListing(total=len(cazadores), cazadores=cazadores)

    async def search(self, nombre: str | None) -> HunterSearch:
        """Busca por nombre en todos los servicios.

        `found=False` cubre tanto "ningún servicio lo tiene" como "todos los
        servicios fallaron"; el cliente no puede distinguirlos.
        """

        # Valida antes de cualquier llamada a los servicios.
        operation = HunterOperation.find_by_name(nombre)
        outcomes = await self._dispatch(operation)

        cazadores = merge_by_identity(
            (normalize_search(o) for o in successes(outcomes)),
            self._identity_fields,
        )
        if not cazadores:
            return HunterSearch(found=False, message=NOT_FOUND_MESSAGE)
        return HunterSearch(found=True, total=len(cazadores), cazadores=cazadores)

    async def create(self, body: Any) -> WriteReport:
        echoes = await self._write(HunterOperation.create(body), on_total_failure=self._create_failed)
        return WriteReport(message=self._summary("creado", echoes), resultados=echoes)

    async def update(self, record_id: object, body: Any) -> WriteReport:
        echoes = await self._write(HunterOperation.update(record_id, body), on_total_failure=self._not_found)
        return WriteReport(message=self._summary("actualizado", echoes), resultados=echoes)

    async def delete(self, record_id: object) -> DeleteReport:
        echoes = await self._write(HunterOperation.delete(record_id), on_total_failure=self._not_found)
        return DeleteReport(message=self._summary("eliminado", echoes), eliminados=echoes)

    async def _write(
        self,
        operation: HunterOperation,
        *,
        on_total_failure: Callable[[HunterOperation], Exception],
    ) -> list[ServiceEcho]:
        outcomes = await self._dispatch(operation)
        echoes = [normalize_write(outcome) for outcome in successes(outcomes)]
        if not echoes:
            logger.error(
                "Ningún servicio aceptó %s (id=%s)",
                operation.kind.value,
                operation.record_id,
            )
            raise on_total_failure(operation)
        if len(echoes) < len(outcomes):
            logger.warning(
                "%s aplicado en %d de %d servicios; los servicios quedan divergentes",
                operation.kind.value,
                len(echoes),
                len(outcomes),
            )
        return echoes

    @staticmethod
    def _create_failed(operation: HunterOperation) -> Exception:
        return AllBackendsFailedError("Error al crear el cazador en los servicios")

    @staticmethod
    def _not_found(operation: HunterOperation) -> Exception:
        return NotFoundInAnyBackendError(NOT_FOUND_ANY_MESSAGE)

    def _summary(self, verb: str, echoes: list[ServiceEcho]) -> str:
        return f"Cazador {verb} en {len(echoes)} de {len(self._services)} servicios"
