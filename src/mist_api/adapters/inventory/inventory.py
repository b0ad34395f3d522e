"""Operaciones de inventario de un org."""

from __future__ import annotations

import logging
from typing import Sequence

from mist_api.adapters.http_client import MistHttpClient
from mist_api.adapters.inventory.models import (
    ClaimResult,
    Inventory,
    InventoryOp,
    InventoryOpResult,
    InventoryUpdate,
)
from mist_api.core.domain.errors import MistApiError

_LOGGER = logging.getLogger(__name__)


def inventory_path(org_id: str, query: str | None = None) -> str:
    if query:
        return f"/orgs/{org_id}/inventory?{query}"
    return f"/orgs/{org_id}/inventory"


def list_inventory(
    client: MistHttpClient,
    org_id: str,
    query: str | None = None,
) -> list[Inventory] | None:
    """Lista el inventario; `query` se añade tal cual (p.ej. `type=ap`)."""

    try:
        inventories = client.get(inventory_path(org_id, query), response_type=list[Inventory])
    except MistApiError as err:
        _LOGGER.warning("list inventories request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("list inventories request succeed")
    return inventories


def claim(client: MistHttpClient, org_id: str, codes: Sequence[str]) -> ClaimResult | None:
    try:
        result = client.post(inventory_path(org_id), list(codes), ClaimResult)
    except MistApiError as err:
        _LOGGER.warning("claim inventory request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("claim inventory request succeed")
    return result


def _update(client: MistHttpClient, org_id: str, update: InventoryUpdate) -> InventoryOpResult | None:
    op = update.op.value
    try:
        result = client.put(inventory_path(org_id), update, InventoryOpResult)
    except MistApiError as err:
        _LOGGER.warning("%s inventory request failed (%s)", op, err.kind.value)
        return None
    _LOGGER.debug("%s inventory request succeed", op)
    return result


def delete(
    client: MistHttpClient,
    org_id: str,
    serials: Sequence[str] | None = None,
    macs: Sequence[str] | None = None,
) -> InventoryOpResult | None:
    update = InventoryUpdate(
        op=InventoryOp.DELETE,
        serials=list(serials) if serials is not None else None,
        macs=list(macs) if macs is not None else None,
    )
    return _update(client, org_id, update)


def assign(
    client: MistHttpClient,
    org_id: str,
    site_id: str,
    macs: Sequence[str],
    no_reassign: bool | None = None,
    disable_auto_config: bool | None = None,
    managed: bool | None = None,
) -> InventoryOpResult | None:
    update = InventoryUpdate(
        op=InventoryOp.ASSIGN,
        site_id=site_id,
        macs=list(macs),
        no_reassign=no_reassign,
        disable_auto_config=disable_auto_config,
        managed=managed,
    )
    return _update(client, org_id, update)


def unassign(client: MistHttpClient, org_id: str, macs: Sequence[str]) -> InventoryOpResult | None:
    update = InventoryUpdate(op=InventoryOp.UNASSIGN, macs=list(macs))
    return _update(client, org_id, update)
