"""Modelos de sites y site groups (Pydantic v2).

ref: https://api.mist.com/api/v1/docs/Site#site
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Site(BaseModel):
    """Un site (ubicación física) dentro de un org.

    El `org_id` suele ir implícito en la ruta; el API lo devuelve en las
    respuestas pero no es obligatorio al crear.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    org_id: str | None = None
    name: str
    timezone: str | None = None
    country_code: str | None = None
    secpolicy_id: str | None = None
    alarmtemplate_id: str | None = None
    networktemplate_id: str | None = None
    latlng: dict[str, float] | None = Field(
        default=None,
        description='Coordenadas {"lat": ..., "lng": ...}.',
    )
    sitegroup_ids: list[str] | None = None
    address: str | None = None
    notes: str | None = None


class SiteStats(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    id: str
    address: str | None = None
    alarmtemplate_id: str | None = None
    country_code: str | None = None
    created_time: int | None = None
    lat: float | None = None
    latlng: dict[str, float] | None = None
    lng: float | None = None
    modified_time: int | None = None
    msp_id: str | None = None
    networktemplate_id: str | None = None
    num_ap: int = 0
    num_ap_connected: int = 0
    num_clients: int = 0
    num_devices: int = 0
    num_devices_connected: int = 0
    num_gateway: int = 0
    num_gateway_connected: int = 0
    num_switch: int = 0
    num_switch_connected: int = 0
    org_id: str | None = None
    rftemplate_id: str | None = None
    secpolicy_id: str | None = None
    timezone: str | None = None
    tzoffset: int | None = None


class SiteGroup(BaseModel):
    """Colección nombrada de sites para operaciones en bloque."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str
    org_id: str | None = None
    site_ids: list[str] = Field(default_factory=list)
    created_time: int | None = None
    modified_time: int | None = None
