"""Tests for the httpx transport wrapper."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
from pydantic import BaseModel
from respx import MockRouter

from mist_api.adapters.http_client import MistHttpClient, serialize_body
from mist_api.core.config import MistSettings
from mist_api.core.domain.errors import FailureKind, MistApiError, MistConfigError

from ._helpers import API_BASE, TOKEN


class _Thing(BaseModel):
    name: str
    note: str | None = None


class TestConstruction:
    def test_missing_token_raises_config_error(self) -> None:
        settings = MistSettings(token=None, api_base=API_BASE, _env_file=None)
        with pytest.raises(MistConfigError):
            MistHttpClient(settings)

    def test_blank_token_raises_config_error(self) -> None:
        settings = MistSettings(token="   ", api_base=API_BASE, _env_file=None)
        with pytest.raises(MistConfigError) as excinfo:
            MistHttpClient(settings)
        assert excinfo.value.kind is FailureKind.CONFIG

    def test_base_url_comes_from_settings(self, client: MistHttpClient) -> None:
        assert client.base_url.rstrip("/") == API_BASE


class TestRequest:
    def test_authorization_header_is_sent(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.get(f"{API_BASE}/self").mock(
            return_value=httpx.Response(200, json={"ok": True})
        )

        assert client.get("/self") == {"ok": True}
        request = route.calls.last.request
        assert request.headers["Authorization"] == f"Token {TOKEN}"

    def test_model_body_is_dumped_without_none(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.post(f"{API_BASE}/things").mock(
            return_value=httpx.Response(200, json={"name": "a"})
        )

        result = client.post("/things", _Thing(name="a"), _Thing)

        assert result == _Thing(name="a")
        assert json.loads(route.calls.last.request.content) == {"name": "a"}

    def test_none_body_sends_no_content(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.post(f"{API_BASE}/logout").mock(
            return_value=httpx.Response(200, json={})
        )

        client.post("/logout")

        assert route.calls.last.request.content == b""
        assert "content-type" not in route.calls.last.request.headers

    def test_connection_error_is_transport_failure(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        respx_mock.get(f"{API_BASE}/self").mock(side_effect=httpx.ConnectError("unreachable"))

        with pytest.raises(MistApiError) as excinfo:
            client.get("/self")

        assert excinfo.value.kind is FailureKind.TRANSPORT
        assert excinfo.value.method == "GET"

    def test_non_json_body_is_decode_failure(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        respx_mock.get(f"{API_BASE}/self").mock(
            return_value=httpx.Response(502, text="<html>bad gateway</html>")
        )

        with pytest.raises(MistApiError) as excinfo:
            client.get("/self")

        assert excinfo.value.kind is FailureKind.DECODE
        assert excinfo.value.status_code == 502

    def test_shape_mismatch_is_unexpected_shape(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        respx_mock.get(f"{API_BASE}/things/1").mock(
            return_value=httpx.Response(404, json={"detail": "not found"})
        )

        with pytest.raises(MistApiError) as excinfo:
            client.get("/things/1", response_type=_Thing)

        assert excinfo.value.kind is FailureKind.UNEXPECTED_SHAPE

    def test_non_2xx_with_matching_body_is_returned(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        respx_mock.get(f"{API_BASE}/anything").mock(
            return_value=httpx.Response(400, json={"detail": "bad"})
        )

        assert client.get("/anything", response_type=Any) == {"detail": "bad"}

    def test_cookies_persist_between_calls(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        respx_mock.post(f"{API_BASE}/login").mock(
            return_value=httpx.Response(
                200, json={}, headers={"Set-Cookie": "sessionid=abc123; Path=/"}
            )
        )
        route = respx_mock.get(f"{API_BASE}/self").mock(
            return_value=httpx.Response(200, json={})
        )

        client.post("/login", {"email": "a@b.c", "password": "x"})
        client.get("/self")

        assert "sessionid=abc123" in route.calls.last.request.headers.get("Cookie", "")


class TestSerializeBody:
    def test_list_of_models(self) -> None:
        assert serialize_body([_Thing(name="a"), _Thing(name="b", note="n")]) == [
            {"name": "a"},
            {"name": "b", "note": "n"},
        ]

    def test_plain_values_pass_through(self) -> None:
        assert serialize_body({"name": "x"}) == {"name": "x"}
        assert serialize_body(["S1", "S2"]) == ["S1", "S2"]
        assert serialize_body(None) is None
