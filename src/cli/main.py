"""CLI del balanceador (Typer).

Comandos:
- `serve`: levanta la API HTTP con uvicorn.
- `listar` / `buscar`: ejecutan el balanceador en proceso y muestran el
  resultado fusionado en una tabla.
- `doctor`: diagnósticos y configuración de los servicios.
"""

from __future__ import annotations

import asyncio
import json
from typing import Awaitable, Callable, Optional, TypeVar

import typer
import uvicorn
from rich.console import Console

from adapters.http_client import build_async_client
from adapters.hunter_services import build_hunter_services
from cli import doctor
from cli.ui_components import build_hunters_table, print_banner
from core.config import AppSettings
from core.errors import GatewayError
from core.log_setup import configure_logging
from core.services.hunters_gateway import HuntersGateway

app = typer.Typer(no_args_is_help=True, help="Balanceador que unifica los servicios de cazadores.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

T = TypeVar("T")


async def _with_gateway(settings: AppSettings, action: Callable[[HuntersGateway], Awaitable[T]]) -> T:
    async with build_async_client(settings) as client:
        gateway = HuntersGateway(
            build_hunter_services(settings, client=client),
            identity_fields=settings.identity_fields,
        )
        return await action(gateway)


def _run_gateway(action: Callable[[HuntersGateway], Awaitable[T]]) -> T:
    settings = AppSettings()
    configure_logging(settings.log_level)
    try:
        return asyncio.run(_with_gateway(settings, action))
    except GatewayError as exc:
        _console.print(f"[red]Error:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Interfaz de escucha (por defecto HOST o 0.0.0.0)."),
    port: Optional[int] = typer.Option(None, help="Puerto (por defecto PORT o 5000)."),
    no_banner: bool = typer.Option(False, "--no-banner", help="No mostrar el banner."),
) -> None:
    """Levanta la API HTTP del balanceador."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    if not no_banner:
        print_banner(_console)
    _console.print(f"Balanceador corriendo en puerto {port or settings.port}")
    uvicorn.run(
        "api.main:build_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


@app.command()
def listar(
    as_json: bool = typer.Option(False, "--json", help="Imprimir JSON en vez de tabla."),
) -> None:
    """Lista los cazadores fusionados de todos los servicios."""

    listing = _run_gateway(lambda gateway: gateway.list_hunters())
    if as_json:
        typer.echo(json.dumps(listing.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return
    _console.print(build_hunters_table(listing.cazadores))


@app.command()
def buscar(
    nombre: str = typer.Argument(..., help="Nombre del cazador."),
    as_json: bool = typer.Option(False, "--json", help="Imprimir JSON en vez de tabla."),
) -> None:
    """Busca un cazador por nombre en todos los servicios."""

    result = _run_gateway(lambda gateway: gateway.search(nombre))
    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json", exclude_none=True), ensure_ascii=False, indent=2))
        return
    if not result.found:
        _console.print(f"[yellow]{result.message}[/yellow]")
        raise typer.Exit(code=1)
    _console.print(build_hunters_table(result.cazadores or [], title=f"Cazadores '{nombre}'"))


def run() -> None:
    app()
