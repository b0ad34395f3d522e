"""Modelos de organización (Pydantic v2).

ref: https://api.mist.com/api/v1/docs/Org#org

Nota sobre flags booleanos:
- Varios flags (`requires_special_char`, `use_wxtunnel`, `for_site`, ...) se
  completan con `True` cuando el API no los envía. El nombre histórico del
  default era "disabled", pero el valor observado siempre fue `True`; se
  conserva el valor por compatibilidad.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# TODO: confirm against the API docs whether the "disabled" flags should default to False.
FLAG_DEFAULT = True


class Org(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str
    session_expiry: int | None = Field(default=None, description="Minutos.")
    alarmtemplate_id: str | None = None
    orggroup_ids: list[str] | None = None
    allow_mist: bool = True


class OrgStats(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    id: str
    orggroup_ids: list[str] | None = None
    allow_mist: bool
    num_inventory: int
    num_devices: int
    num_devices_connected: int
    num_devices_disconnected: int
    num_sites: int


class OrgSetting(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    for_site: bool = FLAG_DEFAULT
    site_id: str
    org_id: str
    created_time: int
    modified_time: int
    tags: list[str] = Field(default_factory=list)


class PasswordPolicy(BaseModel):
    enabled: bool = True
    freshness: int = Field(..., description="Días hasta expirar la contraseña.")
    min_length: int
    requires_special_char: bool = FLAG_DEFAULT
    requires_two_factor_auth: bool = FLAG_DEFAULT


class Management(BaseModel):
    use_wxtunnel: bool = FLAG_DEFAULT
    use_mxtunnel: bool = FLAG_DEFAULT
    mxtunnel_ids: list[str] = Field(default_factory=list)


class Pcap(BaseModel):
    bucket: str
    max_pkt_len: int


class Security(BaseModel):
    disable_local_ssh: bool = FLAG_DEFAULT
    limit_ssh_access: bool = FLAG_DEFAULT
    fips_zeroize_password: str


class Installer(BaseModel):
    grace_period: int
    extra_site_ids: list[str] = Field(default_factory=list)
    allow_all_sites: bool = FLAG_DEFAULT


class RemoteSyslogServer(BaseModel):
    host: str
    port: int
    protocol: str
    facility: str
    severity: str
    tag: str


class RemoteSyslog(BaseModel):
    enabled: bool = FLAG_DEFAULT
    send_to_all_servers: bool = FLAG_DEFAULT
    servers: list[RemoteSyslogServer] = Field(default_factory=list)


class AutoSiteAssignment(BaseModel):
    enable: bool = FLAG_DEFAULT
    rules: list[dict[str, str]] = Field(default_factory=list)


class AutoDeviceNaming(BaseModel):
    enable: bool = FLAG_DEFAULT
    rules: list[dict[str, str]] = Field(default_factory=list)


class AutoDeviceProfile(BaseModel):
    enable: bool = FLAG_DEFAULT
    rules: list[dict[str, str]] = Field(default_factory=list)


class CloudShark(BaseModel):
    apitoken: str
    url: str | None = None


class DeviceCert(BaseModel):
    cert: str
    key: str


class OrgSettingParams(BaseModel):
    """Body de `PUT /orgs/{org}/setting`; solo se envían las secciones presentes."""

    name: str
    password_policy: PasswordPolicy | None = None
    ui_idle_timeout: int | None = None
    mgmt: Management | None = None
    disable_pcap: bool | None = None
    pcap: Pcap | None = None
    pcap_bucket_verified: bool | None = None
    security: Security | None = None
    installer: Installer | None = None
    remote_syslog: RemoteSyslog | None = None
    auto_site_assignment: AutoSiteAssignment | None = None
    auto_device_naming: AutoDeviceNaming | None = None
    cloudshark: CloudShark | None = None
    auto_deviceprofile_assignment: AutoDeviceProfile | None = None
    cacerts: list[str] | None = None
    device_cert: DeviceCert | None = None
    tags: list[str] | None = None
