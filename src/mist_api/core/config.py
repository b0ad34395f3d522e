"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los adaptadores.
- La URL base se inyecta al construir el cliente; los tests apuntan a un mock.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "https://api.mist.com/api/v1"
ENV_PREFIX = "MIST_"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "mist-api"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "mist-api"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "mist-api"
    return Path.home() / ".config" / "mist-api"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _is_setting_key(key: str) -> bool:
    if not key.startswith(ENV_PREFIX):
        return False
    return key[len(ENV_PREFIX):].lower() in MistSettings.model_fields


def _read_user_env(env_path: Path) -> dict[str, str]:
    """Claves `MIST_*` ya guardadas; los valores se leen tal cual (sin comillas)."""

    data: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = raw_line.partition("=")
        key = key.strip()
        if sep and _is_setting_key(key):
            data[key] = value.strip()
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza settings de mist-api en el .env global del usuario.

    Solo acepta variables de `MistSettings` (`MIST_TOKEN`, `MIST_API_BASE`, ...).
    El fichero es propio del cliente: al reescribirlo se descarta cualquier otra línea.
    """

    unknown = sorted(k for k in values if not _is_setting_key(k))
    if unknown:
        raise ValueError(f"not a mist-api setting: {', '.join(unknown)}")

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _read_user_env(env_path)

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# mist-api user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class MistSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars).
    - Un único contrato de configuración para CLI y transporte HTTP.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    token: str | None = Field(
        default=None,
        description="API token enviado como `Authorization: Token <token>`.",
    )
    api_base: str = Field(
        default=DEFAULT_API_BASE,
        min_length=8,
        description="URL base de la API REST (sin barra final).",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging para la CLI.",
    )
