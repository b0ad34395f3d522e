"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from mist_api.adapters.auth import get_privileges
from mist_api.adapters.http_client import MistHttpClient
from mist_api.core.config import MistSettings, write_user_env_vars
from mist_api.core.domain.errors import MistConfigError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: MistSettings) -> tuple[bool, str]:
    try:
        with MistHttpClient(settings) as client:
            whoami = get_privileges(client)
    except MistConfigError as exc:
        return False, str(exc)
    if whoami is None:
        return False, "GET /self failed (see logs)"
    return True, f"authenticated as {whoami.email}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = MistSettings()

    table = Table(title="mist-api Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.token:
        table.add_row("API token", "OK", "MIST_TOKEN configured")
    else:
        table.add_row("API token", "FAIL", "MIST_TOKEN is not configured")
    table.add_row("API base", "OK", settings.api_base)

    ok_api, detail_api = _check_api(settings)
    table.add_row("API access", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not settings.token:
        _console.print("\n[yellow]Note:[/yellow] run `mist-api doctor setup` to store a token.")


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores the token in the user config .env)."""

    settings = MistSettings()
    base_url = typer.prompt("API base URL", default=settings.api_base, show_default=True).strip()
    token = typer.prompt("API token", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not token:
        raise typer.BadParameter("base URL and token are required")

    env_path = write_user_env_vars({"MIST_API_BASE": base_url, "MIST_TOKEN": token})
    _console.print(f"[green]Saved config to:[/green] {env_path}")
