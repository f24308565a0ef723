"""Resultado etiquetado de invocar un servicio.

Cada llamada produce exactamente un `Success` o un `Failure`. Los fallos se
transportan como valores para que el coordinador nunca tenga que propagar
excepciones de un servicio concreto.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class FailureKind(str, Enum):
    """Clasificación del fallo de un servicio."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    STATUS = "status"
    DECODE = "decode"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Success:
    backend: str
    payload: Any


@dataclass(frozen=True)
class Failure:
    backend: str
    kind: FailureKind
    reason: str
    status_code: int | None = None
    cause: BaseException | None = None

    @property
    def is_not_found(self) -> bool:
        return self.kind is FailureKind.STATUS and self.status_code == 404


BackendOutcome = Union[Success, Failure]


def successes(outcomes: list[BackendOutcome]) -> list[Success]:
    """Filtra los éxitos conservando el orden de los servicios."""

    return [outcome for outcome in outcomes if isinstance(outcome, Success)]


def failures(outcomes: list[BackendOutcome]) -> list[Failure]:
    return [outcome for outcome in outcomes if isinstance(outcome, Failure)]
