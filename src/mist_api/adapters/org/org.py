"""Operaciones de organización: org, stats y settings."""

from __future__ import annotations

import logging

from mist_api.adapters.http_client import MistHttpClient
from mist_api.adapters.org.models import Org, OrgSetting, OrgSettingParams, OrgStats
from mist_api.core.domain.errors import MistApiError

_LOGGER = logging.getLogger(__name__)


def orgs_path() -> str:
    return "/orgs"


def org_path(org_id: str) -> str:
    return f"{orgs_path()}/{org_id}"


def org_stats_path(org_id: str) -> str:
    return f"{org_path(org_id)}/stats"


def org_setting_path(org_id: str) -> str:
    return f"{org_path(org_id)}/setting"


def get(client: MistHttpClient, org_id: str) -> Org | None:
    try:
        org = client.get(org_path(org_id), response_type=Org)
    except MistApiError as err:
        _LOGGER.warning("get org request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("get org request succeed")
    return org


def get_setting(client: MistHttpClient, org_id: str) -> OrgSetting | None:
    try:
        setting = client.get(org_setting_path(org_id), response_type=OrgSetting)
    except MistApiError as err:
        _LOGGER.warning("org setting request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("org setting request succeed")
    return setting


def update_setting(
    client: MistHttpClient,
    org_id: str,
    params: OrgSettingParams,
) -> OrgSetting | None:
    try:
        setting = client.put(org_setting_path(org_id), params, OrgSetting)
    except MistApiError as err:
        _LOGGER.warning("org setting change request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("org setting change request succeed")
    return setting


def get_stats(client: MistHttpClient, org_id: str) -> OrgStats | None:
    try:
        stats = client.get(org_stats_path(org_id), response_type=OrgStats)
    except MistApiError as err:
        _LOGGER.warning("org stats request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("org stats request succeed")
    return stats


def create(client: MistHttpClient, org: Org) -> Org | None:
    try:
        created = client.post(orgs_path(), org, Org)
    except MistApiError as err:
        _LOGGER.warning("org create request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("org create request succeed")
    return created


def update(client: MistHttpClient, org_id: str, org: Org) -> Org | None:
    try:
        updated = client.put(org_path(org_id), org, Org)
    except MistApiError as err:
        _LOGGER.warning("org update request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("org update request succeed")
    return updated


def clone(client: MistHttpClient, org_id: str, name: str) -> Org | None:
    """Envía `{"name": name}` al org existente."""

    try:
        cloned = client.put(org_path(org_id), {"name": name}, Org)
    except MistApiError as err:
        _LOGGER.warning("org clone request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("org clone request succeed")
    return cloned
