"""Normalización de respuestas heterogéneas de los servicios.

Cada servicio puede devolver formas distintas para la misma operación (lista
directa o envuelta, `cazador` suelto o `cazadores` en lista). Aquí todo se
reduce a una secuencia de registros.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Union

from core.domain.models import Record, ServiceEcho
from core.domain.outcomes import Success

logger = logging.getLogger(__name__)

LIST_FIELD = "cazadores"
SINGLE_FIELD = "cazador"
FOUND_FIELD = "found"


@dataclass(frozen=True)
class NotFound:
    """El servicio declaró `found: false`."""


@dataclass(frozen=True)
class SingleRecord:
    record: Any


@dataclass(frozen=True)
class RecordList:
    records: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class NoRecords:
    """`found: true` sin ningún campo de registros reconocible."""


@dataclass(frozen=True)
class SingleAndList:
    record: Any
    records: list[Any] = field(default_factory=list)


SearchShape = Union[NotFound, SingleRecord, RecordList, NoRecords, SingleAndList]


def _only_records(items: list[Any], *, backend: str) -> list[Record]:
    records: list[Record] = []
    for item in items:
        if isinstance(item, dict):
            records.append(item)
        else:
            logger.warning("Servicio %s devolvió un elemento que no es un cazador: %r", backend, item)
    return records


def normalize_list(outcome: Success) -> list[Record]:
    """`GET /cazadores`: lista directa o envuelta en `{"cazadores": [...]}`."""

    payload = outcome.payload
    if isinstance(payload, dict):
        payload = payload.get(LIST_FIELD)
    if not isinstance(payload, list):
        return []
    return _only_records(payload, backend=outcome.backend)


def classify_search(payload: Any) -> SearchShape:
    """Clasifica el sobre de `GET /cazadores/buscar` en una variante explícita."""

    if not isinstance(payload, dict) or not payload.get(FOUND_FIELD):
        return NotFound()

    single = payload.get(SINGLE_FIELD)
    many = payload.get(LIST_FIELD)
    has_single = isinstance(single, dict)
    has_many = isinstance(many, list)

    if has_single and has_many:
        return SingleAndList(record=single, records=many)
    if has_many:
        return RecordList(records=many)
    if has_single:
        return SingleRecord(record=single)
    return NoRecords()


def normalize_search(outcome: Success) -> list[Record]:
    shape = classify_search(outcome.payload)
    items: list[Any]
    if isinstance(shape, SingleRecord):
        items = [shape.record]
    elif isinstance(shape, RecordList):
        items = shape.records
    elif isinstance(shape, SingleAndList):
        items = [*shape.records, shape.record]
    elif isinstance(shape, NoRecords):
        logger.warning("Servicio %s dijo found=true pero no envió cazadores", outcome.backend)
        items = []
    else:
        items = []
    return _only_records(items, backend=outcome.backend)


def normalize_write(outcome: Success) -> ServiceEcho:
    """Escrituras: se conserva el eco tal cual, etiquetado con su servicio."""

    return ServiceEcho(servicio=outcome.backend, respuesta=outcome.payload)
