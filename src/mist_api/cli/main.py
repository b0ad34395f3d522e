"""CLI de mist-api (Typer).

Punto de entrada mínimo: consulta privilegios, sites e inventario de un org.
Los comandos no implementan lógica; delegan en `mist_api.adapters`.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from mist_api.adapters import auth, inventory, sites
from mist_api.adapters.http_client import MistHttpClient
from mist_api.cli import doctor
from mist_api.cli.ui_components import (
    build_inventory_table,
    build_sites_table,
    build_whoami_table,
)
from mist_api.core.config import MistSettings
from mist_api.core.domain.errors import MistConfigError
from mist_api.core.logging_setup import configure_logging

app = typer.Typer(no_args_is_help=True, help="Mist cloud API client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _client() -> MistHttpClient:
    settings = MistSettings()
    configure_logging(settings.log_level)
    try:
        return MistHttpClient(settings)
    except MistConfigError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc


@app.command()
def whoami() -> None:
    """Show the authenticated user and its privileges."""

    with _client() as client:
        result = auth.get_privileges(client)
    if result is None:
        raise typer.Exit(code=1)
    _console.print(build_whoami_table(result))


@app.command(name="sites")
def list_sites(org_id: str = typer.Argument(..., help="Organization id.")) -> None:
    """List the sites of an org."""

    with _client() as client:
        result = sites.list_sites(client, org_id)
    if result is None:
        raise typer.Exit(code=1)
    _console.print(build_sites_table(result))


@app.command(name="inventory")
def list_inventory(
    org_id: str = typer.Argument(..., help="Organization id."),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Raw query string, e.g. type=ap."),
) -> None:
    """List the claimed devices of an org."""

    with _client() as client:
        result = inventory.list_inventory(client, org_id, query)
    if result is None:
        raise typer.Exit(code=1)
    _console.print(build_inventory_table(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
