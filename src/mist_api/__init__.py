"""Cliente Python para la API REST de Mist (cloud-managed wireless).

Uso típico:

    from mist_api import MistHttpClient
    from mist_api.adapters import sites

    with MistHttpClient() as client:
        print(sites.list_sites(client, org_id))
"""

from mist_api.adapters.http_client import MistHttpClient
from mist_api.core.config import MistSettings
from mist_api.core.domain.errors import FailureKind, MistApiError, MistConfigError

__all__ = [
    "FailureKind",
    "MistApiError",
    "MistConfigError",
    "MistHttpClient",
    "MistSettings",
]

__version__ = "0.1.0"
