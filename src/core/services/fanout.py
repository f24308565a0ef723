"""Coordinador de fan-out.

Lanza la misma operación contra todos los servicios a la vez y espera a que
*todos* terminen. Cada tarea devuelve su propio resultado; nada se comparte
entre llamadas concurrentes y los resultados solo se combinan tras el join.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from core.domain.operations import HunterOperation
from core.domain.outcomes import BackendOutcome, Failure, FailureKind
from core.interfaces.hunter_service import HunterService

logger = logging.getLogger(__name__)


async def _safe_execute(service: HunterService, operation: HunterOperation) -> BackendOutcome:
    name = getattr(service, "name", service.__class__.__name__)
    try:
        outcome = await service.execute(operation)
    except Exception as exc:
        # Un cliente que rompe su contrato no puede tumbar al resto.
        outcome = Failure(
            backend=name,
            kind=FailureKind.UNEXPECTED,
            reason=f"{type(exc).__name__}: {exc}",
            cause=exc,
        )

    if isinstance(outcome, Failure):
        logger.warning(
            "Servicio %s falló en %s (%s): %s",
            outcome.backend,
            operation.kind.value,
            outcome.kind.value,
            outcome.reason,
        )
    return outcome


async def fan_out(
    services: Sequence[HunterService],
    operation: HunterOperation,
) -> list[BackendOutcome]:
    """Ejecuta `operation` en todos los servicios y devuelve un resultado por servicio.

    El orden de la salida es el orden de `services`, sin importar cuál termina
    antes. Nunca lanza por el fallo de un servicio.
    """

    if not services:
        return []
    tasks = [_safe_execute(service, operation) for service in services]
    return list(await asyncio.gather(*tasks))
