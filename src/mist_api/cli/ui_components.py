"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.table import Table

from mist_api.adapters.auth.models import Whoami
from mist_api.adapters.inventory.models import Inventory
from mist_api.adapters.sites.models import Site


def build_whoami_table(whoami: Whoami) -> Table:
    """Tabla de privilegios del usuario autenticado."""

    table = Table(title=f"{whoami.first_name} {whoami.last_name} <{whoami.email}>")
    table.add_column("Scope", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Role", style="green")
    table.add_column("Org", style="magenta")
    table.add_column("Site", style="dim")
    for priv in whoami.privileges:
        table.add_row(priv.scope, priv.name, priv.role, priv.org_id, priv.site_id or "-")
    return table


def build_sites_table(sites: Iterable[Site]) -> Table:
    table = Table(title="Sites")
    table.add_column("Id", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Country", style="white")
    table.add_column("Timezone", style="white")
    table.add_column("Address", style="magenta")
    for site in sites:
        table.add_row(
            site.id or "-",
            site.name,
            site.country_code or "-",
            site.timezone or "-",
            site.address or "-",
        )
    return table


def build_inventory_table(items: Iterable[Inventory]) -> Table:
    table = Table(title="Inventory")
    table.add_column("Serial", style="cyan", no_wrap=True)
    table.add_column("Model", style="white")
    table.add_column("Type", style="white")
    table.add_column("MAC", style="magenta")
    table.add_column("Site", style="dim")
    table.add_column("Connected", style="green")
    for item in items:
        connected = "-" if item.connected is None else ("yes" if item.connected else "no")
        table.add_row(
            item.serial,
            item.model,
            item.device_type,
            item.mac,
            item.site_id or "-",
            connected,
        )
    return table
