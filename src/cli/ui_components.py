"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Record

_PREFERRED_COLUMNS = ("id", "nombre", "name")


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("BALANCEADOR", style="bold cyan")
    subtitle = Text("Cazadores • Mongo + Postgres • Vista unificada", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _columns_for(records: Sequence[Record]) -> list[str]:
    seen: dict[str, None] = {}
    for column in _PREFERRED_COLUMNS:
        if any(column in record for record in records):
            seen[column] = None
    for record in records:
        for key in record:
            seen.setdefault(key, None)
    return list(seen)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def build_hunters_table(records: Sequence[Record], *, title: str = "Cazadores") -> Table:
    """Tabla con una fila por cazador y una columna por atributo visto."""

    table = Table(title=f"{title} ({len(records)})")
    columns = _columns_for(records)
    for column in columns:
        table.add_column(column, style="cyan" if column in _PREFERRED_COLUMNS else "white")
    for record in records:
        table.add_row(*(_cell(record.get(column)) for column in columns))
    return table


def build_backends_table(title: str = "Servicios") -> Table:
    table = Table(title=title)
    table.add_column("Servicio", style="bright_green", no_wrap=True)
    table.add_column("URL", style="magenta")
    table.add_column("Estado", style="white")
    table.add_column("Detalle", style="dim")
    return table
