"""Rutas de autenticación (relativas a la URL base del cliente)."""

from __future__ import annotations

LOGIN = "login"
LOGIN_LOOKUP = "login/lookup"
LOGOUT = "logout"

# Privileges (self)
PRIV_WHOAMI = "self"
AUDIT_LOG = "self/logs"


def login_path() -> str:
    return f"/{LOGIN}"


def login_lookup_path() -> str:
    return f"/{LOGIN_LOOKUP}"


def logout_path() -> str:
    return f"/{LOGOUT}"


def privileges_path() -> str:
    return f"/{PRIV_WHOAMI}"


def audit_logs_path() -> str:
    return f"/{AUDIT_LOG}"
