"""Tests for org, org stats and org settings endpoints."""

from __future__ import annotations

import json

import httpx
import pytest
from respx import MockRouter

from mist_api.adapters import org
from mist_api.adapters.http_client import MistHttpClient
from mist_api.adapters.org import (
    Management,
    Org,
    OrgSetting,
    OrgSettingParams,
    PasswordPolicy,
    RemoteSyslog,
    Security,
)

from ._helpers import API_BASE, ORG_ID

ORG = {
    "id": ORG_ID,
    "name": "Example Org",
    "session_expiry": 1440,
    "orggroup_ids": ["g1"],
    "allow_mist": False,
}

SETTING = {
    "id": "set-1",
    "for_site": False,
    "site_id": "00000000-0000-0000-0000-000000000000",
    "org_id": ORG_ID,
    "created_time": 10,
    "modified_time": 20,
    "tags": ["lab"],
}


class TestOrgPaths:
    def test_paths(self) -> None:
        assert org.orgs_path() == "/orgs"
        assert org.org_path("abc") == "/orgs/abc"
        assert org.org_stats_path("abc") == "/orgs/abc/stats"
        assert org.org_setting_path("abc") == "/orgs/abc/setting"


class TestOrgCrud:
    def test_get(self, client: MistHttpClient, respx_mock: MockRouter) -> None:
        respx_mock.get(f"{API_BASE}/orgs/{ORG_ID}").mock(return_value=httpx.Response(200, json=ORG))

        result = org.get(client, ORG_ID)

        assert result is not None
        assert result.allow_mist is False
        assert result.orggroup_ids == ["g1"]

    def test_get_accepts_unconstrained_values(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        respx_mock.get(f"{API_BASE}/orgs/{ORG_ID}").mock(
            return_value=httpx.Response(200, json={**ORG, "name": "", "session_expiry": -1})
        )

        result = org.get(client, ORG_ID)

        assert result is not None
        assert result.name == ""
        assert result.session_expiry == -1

    def test_create_posts_org(self, client: MistHttpClient, respx_mock: MockRouter) -> None:
        route = respx_mock.post(f"{API_BASE}/orgs").mock(return_value=httpx.Response(200, json=ORG))

        created = org.create(client, Org(name="Example Org"))

        assert json.loads(route.calls.last.request.content) == {
            "name": "Example Org",
            "allow_mist": True,
        }
        assert created is not None
        assert created.id == ORG_ID

    def test_update_puts_org(self, client: MistHttpClient, respx_mock: MockRouter) -> None:
        route = respx_mock.put(f"{API_BASE}/orgs/{ORG_ID}").mock(
            return_value=httpx.Response(200, json=ORG)
        )

        assert org.update(client, ORG_ID, Org(name="Example Org", session_expiry=1440)) is not None
        assert json.loads(route.calls.last.request.content)["session_expiry"] == 1440

    def test_clone_sends_name_only(self, client: MistHttpClient, respx_mock: MockRouter) -> None:
        route = respx_mock.put(f"{API_BASE}/orgs/{ORG_ID}").mock(
            return_value=httpx.Response(200, json={**ORG, "name": "Copy"})
        )

        cloned = org.clone(client, ORG_ID, "Copy")

        assert json.loads(route.calls.last.request.content) == {"name": "Copy"}
        assert cloned is not None
        assert cloned.name == "Copy"

    def test_create_failure(self, client: MistHttpClient, respx_mock: MockRouter) -> None:
        respx_mock.post(f"{API_BASE}/orgs").mock(
            return_value=httpx.Response(403, json={"detail": "forbidden"})
        )

        assert org.create(client, Org(name="Example Org")) is None


class TestOrgStats:
    def test_get_stats(self, client: MistHttpClient, respx_mock: MockRouter) -> None:
        respx_mock.get(f"{API_BASE}/orgs/{ORG_ID}/stats").mock(
            return_value=httpx.Response(
                200,
                json={
                    "name": "Example Org",
                    "id": ORG_ID,
                    "allow_mist": True,
                    "num_inventory": 12,
                    "num_devices": 10,
                    "num_devices_connected": 8,
                    "num_devices_disconnected": 2,
                    "num_sites": 3,
                },
            )
        )

        stats = org.get_stats(client, ORG_ID)

        assert stats is not None
        assert stats.num_devices_connected == 8

    def test_get_stats_failure(self, client: MistHttpClient, respx_mock: MockRouter) -> None:
        respx_mock.get(f"{API_BASE}/orgs/{ORG_ID}/stats").mock(
            return_value=httpx.Response(200, text="not json")
        )

        assert org.get_stats(client, ORG_ID) is None


class TestOrgSetting:
    def test_get_setting(self, client: MistHttpClient, respx_mock: MockRouter) -> None:
        respx_mock.get(f"{API_BASE}/orgs/{ORG_ID}/setting").mock(
            return_value=httpx.Response(200, json=SETTING)
        )

        setting = org.get_setting(client, ORG_ID)

        assert setting == OrgSetting.model_validate(SETTING)

    def test_update_setting_sends_only_present_sections(
        self, client: MistHttpClient, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.put(f"{API_BASE}/orgs/{ORG_ID}/setting").mock(
            return_value=httpx.Response(200, json=SETTING)
        )
        params = OrgSettingParams(
            name="Example Org",
            ui_idle_timeout=10,
            password_policy=PasswordPolicy(
                enabled=True,
                freshness=90,
                min_length=12,
                requires_special_char=False,
                requires_two_factor_auth=False,
            ),
        )

        assert org.update_setting(client, ORG_ID, params) is not None
        assert json.loads(route.calls.last.request.content) == {
            "name": "Example Org",
            "ui_idle_timeout": 10,
            "password_policy": {
                "enabled": True,
                "freshness": 90,
                "min_length": 12,
                "requires_special_char": False,
                "requires_two_factor_auth": False,
            },
        }

    def test_update_setting_failure(self, client: MistHttpClient, respx_mock: MockRouter) -> None:
        respx_mock.put(f"{API_BASE}/orgs/{ORG_ID}/setting").mock(
            side_effect=httpx.ConnectError("down")
        )

        assert org.update_setting(client, ORG_ID, OrgSettingParams(name="x")) is None


class TestOrgModels:
    def test_org_round_trip_omits_absent_fields(self) -> None:
        item = Org(name="Example Org", alarmtemplate_id="t1")

        dumped = item.model_dump(exclude_none=True)

        assert dumped == {"name": "Example Org", "alarmtemplate_id": "t1", "allow_mist": True}
        assert Org.model_validate(dumped) == item

    @pytest.mark.parametrize(
        "model, flags",
        [
            (Management(), ["use_wxtunnel", "use_mxtunnel"]),
            (Security(fips_zeroize_password="x"), ["disable_local_ssh", "limit_ssh_access"]),
            (RemoteSyslog(), ["enabled", "send_to_all_servers"]),
            (
                PasswordPolicy(freshness=1, min_length=8),
                ["enabled", "requires_special_char", "requires_two_factor_auth"],
            ),
        ],
    )
    def test_unset_flags_default_to_true(self, model: object, flags: list[str]) -> None:
        # Observed API-compat behaviour; flip together with FLAG_DEFAULT once confirmed.
        for flag in flags:
            assert getattr(model, flag) is True

    def test_for_site_defaults_to_true_when_missing(self) -> None:
        payload = {k: v for k, v in SETTING.items() if k != "for_site"}
        assert OrgSetting.model_validate(payload).for_site is True
