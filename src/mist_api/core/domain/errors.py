"""Errores del cliente.

Two tiers only: a configuration error raised while building the client, and
a call error raised by the transport wrapper. Endpoint functions collapse the
latter into their narrow `None` / `False` contract.
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Closed set of reasons a call can fail."""

    CONFIG = "config"
    TRANSPORT = "transport"
    DECODE = "decode"
    UNEXPECTED_SHAPE = "unexpected_shape"


class MistConfigError(RuntimeError):
    """The client cannot be built (missing API token)."""

    kind = FailureKind.CONFIG


class MistApiError(Exception):
    """A single HTTP round trip failed."""

    def __init__(
        self,
        kind: FailureKind,
        method: str,
        url: str,
        *,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        self.method = method
        self.url = url
        self.status_code = status_code
        self.detail = detail
        message = f"{method} {url} failed ({kind.value})"
        if status_code is not None:
            message += f" status={status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
