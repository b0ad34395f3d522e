"""Sites y site groups de un org.

Por qué un paquete:
- Sites y site groups comparten modelos y el prefijo `/orgs/{org}`.
"""

from mist_api.adapters.sites.models import Site, SiteGroup, SiteStats
from mist_api.adapters.sites.sitegroups import (
    create_group,
    delete_group,
    get_group,
    list_groups,
    sitegroup_path,
    sitegroups_path,
    update_group,
)
from mist_api.adapters.sites.sites import (
    create,
    delete,
    get,
    get_stats,
    list_sites,
    site_path,
    site_stats_path,
    sites_path,
    update,
)

__all__ = [
    "Site",
    "SiteGroup",
    "SiteStats",
    "create",
    "create_group",
    "delete",
    "delete_group",
    "get",
    "get_group",
    "get_stats",
    "list_groups",
    "list_sites",
    "site_path",
    "site_stats_path",
    "sitegroup_path",
    "sitegroups_path",
    "update",
    "update_group",
]
