"""Wrapper de httpx.

Por qué un wrapper:
- Un único punto de configuración: headers base (token), cookies, timeout, base URL.
- Contrato uniforme serializar -> enviar -> deserializar para todos los endpoints.
- Facilita testeo: se puede sustituir el transporte por un mock (respx).

Sin reintentos ni backoff: un intento por llamada.

Body `None`: la request sale sin contenido ni `Content-Type` (no se envía un
JSON `null`). Los endpoints del API que aceptan POST sin body (logout) lo toleran.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from mist_api.core.config import MistSettings
from mist_api.core.domain.errors import FailureKind, MistApiError, MistConfigError

_LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def serialize_body(body: Any) -> Any:
    """Convierte el body a algo serializable por `httpx` como JSON.

    - Modelos pydantic: alias del API y sin campos vacíos (`None`).
    - Listas de modelos: cada elemento igual que arriba.
    - `None`: sin body.
    """

    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, (list, tuple)):
        return [serialize_body(item) for item in body]
    return body


class MistHttpClient:
    """Cliente HTTP reutilizable con el token del proceso."""

    def __init__(
        self,
        settings: MistSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or MistSettings()
        token = (self._settings.token or "").strip()
        if not token:
            _LOGGER.warning("env MIST_TOKEN is not configured")
            raise MistConfigError("env MIST_TOKEN is not configured")

        headers = {
            "Authorization": f"Token {token}",
            "Accept": "application/json",
        }
        # httpx.Client keeps a cookie jar across requests.
        self._client = httpx.Client(
            base_url=self._settings.api_base,
            headers=headers,
            timeout=httpx.Timeout(self._settings.timeout_seconds),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> MistHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        response_type: Any = Any,
    ) -> Any:
        """Ejecuta una llamada y devuelve el payload validado como `response_type`.

        Raises:
            MistApiError: fallo de red, JSON inválido o forma inesperada.
        """

        payload = serialize_body(body)
        try:
            response = self._client.request(method, path, json=payload)
        except httpx.HTTPError as exc:
            raise MistApiError(FailureKind.TRANSPORT, method, path, detail=str(exc)) from exc

        _LOGGER.debug("%s %s -> HTTP %s", method, path, response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise MistApiError(
                FailureKind.DECODE,
                method,
                path,
                status_code=response.status_code,
                detail="response body is not JSON",
            ) from exc

        try:
            return _adapter(response_type).validate_python(data)
        except ValidationError as exc:
            raise MistApiError(
                FailureKind.UNEXPECTED_SHAPE,
                method,
                path,
                status_code=response.status_code,
                detail=f"{exc.error_count()} validation error(s)",
            ) from exc

    def get(self, path: str, body: Any = None, response_type: Any = Any) -> Any:
        return self.request("GET", path, body, response_type)

    def post(self, path: str, body: Any = None, response_type: Any = Any) -> Any:
        return self.request("POST", path, body, response_type)

    def put(self, path: str, body: Any = None, response_type: Any = Any) -> Any:
        return self.request("PUT", path, body, response_type)

    def delete(self, path: str, body: Any = None, response_type: Any = Any) -> Any:
        return self.request("DELETE", path, body, response_type)
