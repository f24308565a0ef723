"""Descriptor de la operación lógica que se reparte entre servicios.

Por qué un descriptor:
- El coordinador de fan-out es agnóstico a la operación: recibe un único
  objeto y lo entrega tal cual a cada servicio.
- La validación de entrada ocurre al construirlo, antes de cualquier I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from core.errors import InvalidRequestError


class OperationKind(str, Enum):
    LIST = "list"
    FIND_BY_NAME = "find_by_name"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def is_read(self) -> bool:
        return self in (OperationKind.LIST, OperationKind.FIND_BY_NAME)


@dataclass(frozen=True)
class HunterOperation:
    kind: OperationKind
    name: str | None = None
    record_id: str | None = None
    body: Any = None

    @classmethod
    def list(cls) -> "HunterOperation":
        return cls(kind=OperationKind.LIST)

    @classmethod
    def find_by_name(cls, name: str | None) -> "HunterOperation":
        if name is None or not name.strip():
            raise InvalidRequestError("Debes proporcionar un nombre")
        return cls(kind=OperationKind.FIND_BY_NAME, name=name)

    @classmethod
    def create(cls, body: Any) -> "HunterOperation":
        return cls(kind=OperationKind.CREATE, body=body)

    @classmethod
    def update(cls, record_id: object, body: Any) -> "HunterOperation":
        return cls(kind=OperationKind.UPDATE, record_id=_require_id(record_id), body=body)

    @classmethod
    def delete(cls, record_id: object) -> "HunterOperation":
        return cls(kind=OperationKind.DELETE, record_id=_require_id(record_id))


def _require_id(record_id: object) -> str:
    # El id se reenvía opaco: sin validar formato.
    if record_id is None or str(record_id) == "":
        raise InvalidRequestError("Debes proporcionar un id")
    return str(record_id)
