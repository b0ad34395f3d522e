"""CRUD de site groups."""

from __future__ import annotations

import logging

from mist_api.adapters.http_client import MistHttpClient
from mist_api.adapters.sites.models import SiteGroup
from mist_api.core.domain.errors import MistApiError

_LOGGER = logging.getLogger(__name__)


def sitegroups_path(org_id: str) -> str:
    return f"/orgs/{org_id}/sitegroups"


def sitegroup_path(org_id: str, group_id: str) -> str:
    return f"{sitegroups_path(org_id)}/{group_id}"


def list_groups(client: MistHttpClient, org_id: str) -> list[SiteGroup] | None:
    try:
        groups = client.get(sitegroups_path(org_id), response_type=list[SiteGroup])
    except MistApiError as err:
        _LOGGER.warning("list site groups request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("list site groups request succeed")
    return groups


def get_group(client: MistHttpClient, org_id: str, group_id: str) -> SiteGroup | None:
    try:
        group = client.get(sitegroup_path(org_id, group_id), response_type=SiteGroup)
    except MistApiError as err:
        _LOGGER.warning("get site group request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("get site group request succeed")
    return group


def create_group(client: MistHttpClient, org_id: str, group: SiteGroup) -> SiteGroup | None:
    try:
        created = client.post(sitegroups_path(org_id), group, SiteGroup)
    except MistApiError as err:
        _LOGGER.warning("site group creation is failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("site group creation is succeed")
    return created


def update_group(
    client: MistHttpClient,
    org_id: str,
    group_id: str,
    group: SiteGroup,
) -> SiteGroup | None:
    try:
        updated = client.put(sitegroup_path(org_id, group_id), group, SiteGroup)
    except MistApiError as err:
        _LOGGER.warning("site group modification is failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("site group modification is succeed")
    return updated


def delete_group(client: MistHttpClient, org_id: str, group_id: str) -> bool:
    try:
        client.delete(sitegroup_path(org_id, group_id))
    except MistApiError as err:
        _LOGGER.warning("site group deletion is failed (%s)", err.kind.value)
        return False
    _LOGGER.debug("site group deletion is succeed")
    return True
