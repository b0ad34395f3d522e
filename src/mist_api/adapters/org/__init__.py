from mist_api.adapters.org.models import (
    AutoDeviceNaming,
    AutoDeviceProfile,
    AutoSiteAssignment,
    CloudShark,
    DeviceCert,
    Installer,
    Management,
    Org,
    OrgSetting,
    OrgSettingParams,
    OrgStats,
    PasswordPolicy,
    Pcap,
    RemoteSyslog,
    RemoteSyslogServer,
    Security,
)
from mist_api.adapters.org.org import (
    clone,
    create,
    get,
    get_setting,
    get_stats,
    org_path,
    org_setting_path,
    org_stats_path,
    orgs_path,
    update,
    update_setting,
)

__all__ = [
    "AutoDeviceNaming",
    "AutoDeviceProfile",
    "AutoSiteAssignment",
    "CloudShark",
    "DeviceCert",
    "Installer",
    "Management",
    "Org",
    "OrgSetting",
    "OrgSettingParams",
    "OrgStats",
    "PasswordPolicy",
    "Pcap",
    "RemoteSyslog",
    "RemoteSyslogServer",
    "Security",
    "clone",
    "create",
    "get",
    "get_setting",
    "get_stats",
    "org_path",
    "org_setting_path",
    "org_stats_path",
    "orgs_path",
    "update",
    "update_setting",
]
