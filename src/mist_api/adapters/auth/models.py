"""Modelos de autenticación (Pydantic v2).

Los nombres de campo replican el JSON del API tal cual.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class LoginRequest(BaseModel):
    email: str
    password: str
    two_factor: str | None = Field(
        default=None,
        description="Código de un solo uso (2FA), si la cuenta lo requiere.",
    )


class LoginLookup(BaseModel):
    """Respuesta de `/login/lookup`: si el email usa SSO, la URL del IdP."""

    model_config = ConfigDict(extra="ignore")

    sso_url: str | None = None


class Privilege(BaseModel):
    """Rol concedido al usuario dentro de un org/site/sitegroup."""

    model_config = ConfigDict(extra="ignore")

    scope: str
    org_id: str
    org_name: str | None = None
    msp_id: str | None = None
    msp_name: str | None = None
    orggroup_ids: list[str] | None = None
    name: str
    role: str
    site_id: str | None = None
    sitegroup_ids: list[str] | None = None


class Whoami(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    via_sso: bool | str | None = None
    privileges: list[Privilege] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class AuditLog(BaseModel):
    model_config = ConfigDict(extra="ignore")

    timestamp: float
    message: str
    admin_name: str | None = None
    admin_id: str | None = None
    org_id: str | None = None
    site_id: str | None = None
    src_ip: str | None = None


class AuditLogs(BaseModel):
    model_config = ConfigDict(extra="ignore")

    start: int | None = None
    end: int | None = None
    limit: int | None = None
    total: int | None = None
    results: list[AuditLog] = Field(default_factory=list)


@dataclass(frozen=True)
class LoginAccepted:
    """El API aceptó las credenciales (respondió `{}`)."""


@dataclass(frozen=True)
class LoginRejected:
    """Cualquier otra respuesta; `payload` conserva el JSON recibido."""

    payload: Any


LoginOutcome = Union[LoginAccepted, LoginRejected]


def classify_login_response(payload: Any) -> LoginOutcome:
    """Un login es aceptado solo si el API devuelve un objeto JSON sin claves."""

    if isinstance(payload, dict) and not payload:
        return LoginAccepted()
    return LoginRejected(payload=payload)
