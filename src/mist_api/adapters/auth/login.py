"""Login / logout / privilegios.

ref: https://api.mist.com/api/v1/docs/Auth
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from mist_api.adapters.auth import paths
from mist_api.adapters.auth.models import (
    AuditLogs,
    LoginAccepted,
    LoginLookup,
    LoginRequest,
    Whoami,
    classify_login_response,
)
from mist_api.adapters.http_client import MistHttpClient
from mist_api.core.domain.errors import MistApiError

_LOGGER = logging.getLogger(__name__)


def login(
    client: MistHttpClient,
    email: str,
    password: str,
    two_factor: str | None = None,
) -> bool:
    try:
        request = LoginRequest(email=email, password=password, two_factor=two_factor)
        payload = client.post(paths.login_path(), request)
    except ValidationError:
        _LOGGER.warning("login failed: malformed credentials")
        return False
    except MistApiError as err:
        _LOGGER.warning("login failed: the credentials incorrect (%s)", err.kind.value)
        return False

    if isinstance(classify_login_response(payload), LoginAccepted):
        _LOGGER.info("Login succeed")
        return True

    _LOGGER.warning("login failed: the credentials incorrect")
    return False


def logout(client: MistHttpClient) -> bool:
    try:
        client.post(paths.logout_path())
    except MistApiError as err:
        _LOGGER.warning("logout failed (%s)", err.kind.value)
        return False
    _LOGGER.info("Logout succeed")
    return True


def lookup(client: MistHttpClient, email: str) -> LoginLookup | None:
    """Consulta si el email inicia sesión vía SSO."""

    try:
        result = client.post(paths.login_lookup_path(), {"email": email}, LoginLookup)
    except MistApiError as err:
        _LOGGER.warning("login lookup request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("login lookup request succeed")
    return result


def get_privileges(client: MistHttpClient) -> Whoami | None:
    try:
        whoami = client.get(paths.privileges_path(), response_type=Whoami)
    except MistApiError as err:
        _LOGGER.warning("get_privileges request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("get_privileges request succeed")
    return whoami


def list_audit_logs(client: MistHttpClient) -> AuditLogs | None:
    try:
        logs = client.get(paths.audit_logs_path(), response_type=AuditLogs)
    except MistApiError as err:
        _LOGGER.warning("audit logs request failed (%s)", err.kind.value)
        return None
    _LOGGER.debug("audit logs request succeed")
    return logs
