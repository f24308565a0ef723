"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.http_client import build_async_client
from adapters.hunter_services import build_hunter_services
from cli.ui_components import build_backends_table
from core.config import AppSettings, write_user_env_vars
from core.domain.operations import HunterOperation
from core.domain.outcomes import BackendOutcome, Success
from core.services.fanout import fan_out
from core.services.normalizer import normalize_list

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def check_backends(settings: AppSettings) -> list[tuple[str, str, BackendOutcome]]:
    """Run a `list` against every configured backend and report each outcome."""

    async with build_async_client(settings) as client:
        services = build_hunter_services(settings, client=client)
        outcomes = await fan_out(services, HunterOperation.list())
    return [(service.name, service.base_url, outcome) for service, outcome in zip(services, outcomes)]


@app.command()
def run() -> None:
    """Query every backend and show which ones answer."""

    settings = AppSettings()
    results = asyncio.run(check_backends(settings))

    table = build_backends_table(title="Balanceador Doctor")
    for name, url, outcome in results:
        if isinstance(outcome, Success):
            count = len(normalize_list(outcome))
            table.add_row(name, url, "OK", f"{count} cazadores")
        else:
            table.add_row(name, url, "FAIL", f"{outcome.kind.value}: {outcome.reason}")
    _console.print(table)

    healthy = sum(1 for _, _, outcome in results if isinstance(outcome, Success))
    if healthy == 0:
        _console.print("\n[red]No backend answered:[/red] every request will fail or return empty.")
        raise typer.Exit(code=1)
    if healthy < len(results):
        _console.print("\n[yellow]Note:[/yellow] running degraded, results come from a subset of backends.")


@app.command(name="setup-backends")
def setup_backends() -> None:
    """Interactive backend setup (stores URLs in the user config .env)."""

    settings = AppSettings()
    mongo_url = typer.prompt("Mongo service URL", default=settings.mongo_service_url, show_default=True).strip()
    pg_url = typer.prompt("Postgres service URL", default=settings.pg_service_url, show_default=True).strip()
    port = typer.prompt("Gateway port", default=str(settings.port), show_default=True).strip()

    if not mongo_url or not pg_url:
        raise typer.BadParameter("both backend URLs are required")
    if not port.isdigit():
        raise typer.BadParameter("port must be a number")

    env_path = write_user_env_vars(
        {
            "MONGO_SERVICE_URL": mongo_url,
            "PG_SERVICE_URL": pg_url,
            "PORT": port,
        }
    )

    _console.print(f"[green]Saved backend config to:[/green] {env_path}")
