"""Contrato de un servicio de cazadores.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el coordinador trate igual a Mongo, Postgres o un doble de test.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.operations import HunterOperation
from core.domain.outcomes import BackendOutcome


@runtime_checkable
class HunterService(Protocol):
    """Contrato mínimo para un servicio de cazadores.

    Reglas de diseño:
    - `execute` es asíncrono porque hace I/O (HTTP).
    - Nunca lanza por fallos del servicio: devuelve un `Failure`.
    """

    name: str

    async def execute(self, operation: HunterOperation) -> BackendOutcome:
        """Ejecuta `operation` contra el servicio y devuelve su resultado etiquetado."""

        ...
