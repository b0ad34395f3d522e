"""Autenticación: login/logout, lookup SSO, privilegios (self) y audit logs."""

from mist_api.adapters.auth.login import (
    get_privileges,
    list_audit_logs,
    login,
    logout,
    lookup,
)
from mist_api.adapters.auth.models import (
    AuditLog,
    AuditLogs,
    LoginAccepted,
    LoginLookup,
    LoginOutcome,
    LoginRejected,
    LoginRequest,
    Privilege,
    Whoami,
    classify_login_response,
)

__all__ = [
    "AuditLog",
    "AuditLogs",
    "LoginAccepted",
    "LoginLookup",
    "LoginOutcome",
    "LoginRejected",
    "LoginRequest",
    "Privilege",
    "Whoami",
    "classify_login_response",
    "get_privileges",
    "list_audit_logs",
    "login",
    "logout",
    "lookup",
]
