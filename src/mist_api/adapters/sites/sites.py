"""CRUD de sites y estadísticas por site."""

from __future__ import annotations

import logging

from mist_api.adapters.http_client import MistHttpClient
from mist_api.adapters.sites.models import Site, SiteStats
from mist_api.core.domain.errors import MistApiError

_LOGGER = logging.getLogger(__name__)


def sites_path(org_id: str) -> str:
    return f"/orgs/{org_id}/sites"


def site_path(org_id: str, site_id: str) -> str:
    return f"{sites_path(org_id)}/{site_id}"


def site_stats_path(site_id: str) -> str:
    return f"/sites/{site_id}/stats"


def get_stats(client: MistHttpClient, site_id: str) -> SiteStats | None:
    try:
        stats = client.get(site_stats_path(site_id), response_type=SiteStats)
    except MistApiError as err:
        _LOGGER.warning("get site stats request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("get site stats request succeed")
    return stats


def list_sites(client: MistHttpClient, org_id: str) -> list[Site] | None:
    try:
        sites = client.get(sites_path(org_id), response_type=list[Site])
    except MistApiError as err:
        _LOGGER.warning("list sites request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("list sites request succeed")
    return sites


def get(client: MistHttpClient, org_id: str, site_id: str) -> Site | None:
    try:
        site = client.get(site_path(org_id, site_id), response_type=Site)
    except MistApiError as err:
        _LOGGER.warning("get site request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("get site request succeed")
    return site


def create(client: MistHttpClient, org_id: str, site: Site) -> Site | None:
    try:
        created = client.post(sites_path(org_id), site, Site)
    except MistApiError as err:
        _LOGGER.warning("site creation is failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("site creation is succeed")
    return created


def update(client: MistHttpClient, org_id: str, site_id: str, site: Site) -> Site | None:
    try:
        updated = client.put(site_path(org_id, site_id), site, Site)
    except MistApiError as err:
        _LOGGER.warning("site modification is failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("site modification is succeed")
    return updated


def delete(client: MistHttpClient, org_id: str, site_id: str) -> bool:
    """True si el API respondió con JSON; un 204 sin body cuenta como fallo."""

    try:
        client.delete(site_path(org_id, site_id))
    except MistApiError as err:
        _LOGGER.warning("site deletion is failed (%s)", err.kind.value)
        return False
    _LOGGER.debug("site deletion is succeed")
    return True
