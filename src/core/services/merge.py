"""Fusión y deduplicación de cazadores por identidad.

Regla de desempate: los grupos se recorren en el orden configurado de los
servicios; ante una identidad repetida gana el último valor visto, pero la
posición queda fijada por la primera aparición. Un `dict` de Python da
exactamente esa semántica: reasignar una clave existente no la mueve.
"""

from __future__ import annotations

import logging
from typing import Hashable, Iterable, Sequence

from core.domain.models import Record

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY_FIELDS: tuple[str, ...] = ("id", "name")


def record_identity(
    record: Record,
    identity_fields: Sequence[str] = DEFAULT_IDENTITY_FIELDS,
) -> tuple[str, str] | None:
    """Identidad canónica de un cazador: `(campo, valor)` del primer campo con valor.

    `None` y los valores en blanco cuentan como ausentes. El valor se compara como
    texto sin recortar, así `1` y `"1"` son el mismo cazador pero `"Ana"` y
    `"Ana "` no.
    """

    for name in identity_fields:
        value = record.get(name)
        if value is None:
            continue
        text = str(value)
        if text.strip():
            return name, text
    return None


def merge_by_identity(
    groups: Iterable[Sequence[Record]],
    identity_fields: Sequence[str] = DEFAULT_IDENTITY_FIELDS,
) -> list[Record]:
    """Combina los registros de varios servicios en una colección sin duplicados."""

    merged: dict[Hashable, Record] = {}
    for group_index, records in enumerate(groups):
        for position, record in enumerate(records):
            key: Hashable | None = record_identity(record, identity_fields)
            if key is None:
                # Sin identidad no hay con quién fusionar: ocupa su propia ranura.
                logger.warning(
                    "Cazador sin identidad (%s) en el grupo %d, posición %d: %r",
                    "/".join(identity_fields),
                    group_index,
                    position,
                    record,
                )
                key = ("__sin_identidad__", group_index, position)
            merged[key] = record
    return list(merged.values())
