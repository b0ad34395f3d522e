"""Modelos de inventario (Pydantic v2).

ref: https://api.mist.com/api/v1/docs/Org#inventory
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Inventory(BaseModel):
    """Dispositivo reclamado (claimed) dentro de un org."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    serial: str = Field(..., description="Serial del dispositivo.")
    id: str = Field(..., description="Device id.")
    model: str = Field(..., description="Modelo del dispositivo.")
    device_type: str = Field(..., alias="type", description="Tipo: ap, switch, gateway.")
    mac: str = Field(..., description="Dirección MAC.")
    name: str | None = Field(default=None, description="Nombre si está asignado.")
    site_id: str | None = Field(default=None, description="Site asignado; null si no.")
    deviceprofile_id: str | None = None
    sku: str | None = None
    hw_rev: str | None = None
    magic: str | None = None
    connected: bool | None = None
    modified_time: int = Field(..., description="Última modificación (epoch).")
    created_time: int = Field(..., description="Creación (epoch).")


class ClaimResult(BaseModel):
    """Resultado de reclamar códigos: éxitos y fallos separados por campo."""

    model_config = ConfigDict(extra="ignore")

    added: list[str] = Field(default_factory=list)
    duplicated: list[str] = Field(default_factory=list)
    error: list[str] = Field(default_factory=list)
    inventory_added: list[dict[str, Any]] | None = None
    inventory_duplicated: list[dict[str, Any]] | None = None


class InventoryOp(str, Enum):
    DELETE = "delete"
    ASSIGN = "assign"
    UNASSIGN = "unassign"


class InventoryUpdate(BaseModel):
    """Body de `PUT /orgs/{org}/inventory`; los campos `None` no se envían."""

    op: InventoryOp
    site_id: str | None = None
    serials: list[str] | None = None
    macs: list[str] | None = None
    no_reassign: bool | None = None
    disable_auto_config: bool | None = None
    managed: bool | None = None


class InventoryOpResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    op: str | None = None
    success: list[str] = Field(default_factory=list)
    error: list[str] = Field(default_factory=list)
    reason: list[str] | None = None
