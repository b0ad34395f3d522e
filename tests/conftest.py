"""Fixtures compartidos: settings aislados del entorno y cliente contra respx."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from mist_api.adapters.http_client import MistHttpClient
from mist_api.core.config import MistSettings

from ._helpers import API_BASE, TOKEN


@pytest.fixture
def settings() -> MistSettings:
    return MistSettings(token=TOKEN, api_base=API_BASE, timeout_seconds=5, _env_file=None)


@pytest.fixture
def client(settings: MistSettings) -> Iterator[MistHttpClient]:
    with MistHttpClient(settings) as http_client:
        yield http_client
