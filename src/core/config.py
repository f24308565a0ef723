"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la API ni la CLI.
- Permite que adaptadores (HTTP) y la capa web lean config de forma consistente.

Sin prefijo de entorno: los nombres históricos del despliegue
(`MONGO_SERVICE_URL`, `PG_SERVICE_URL`, `PORT`) siguen funcionando tal cual.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "balanceador-cazadores"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# Balanceador de cazadores user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del balanceador.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para API, CLI y adapters.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    mongo_service_url: str = Field(
        default="http://localhost:4001",
        min_length=8,
        description="Base URL del servicio de cazadores respaldado por Mongo.",
    )
    pg_service_url: str = Field(
        default="http://localhost:4002",
        min_length=8,
        description="Base URL del servicio de cazadores respaldado por Postgres.",
    )

    host: str = Field(
        default="0.0.0.0",
        min_length=1,
        description="Interfaz de escucha del servidor HTTP.",
    )
    port: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="Puerto de escucha del servidor HTTP.",
    )
    api_prefix: str = Field(
        default="/balanceador",
        description="Prefijo fijo bajo el que se publican las rutas del balanceador.",
    )
    cors_origins: str = Field(
        default="*",
        description="Orígenes CORS permitidos, separados por comas.",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request a cada servicio (segundos).",
    )
    user_agent: str = Field(
        default="balanceador-cazadores/0.1",
        min_length=1,
        description="User-Agent enviado a los servicios.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    identity_fields: tuple[str, ...] = Field(
        default=("id", "name"),
        min_length=1,
        description="Campos de identidad de un cazador, en orden de preferencia (id, si no name).",
    )

    @field_validator("api_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = "/" + value
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def service_urls(self) -> dict[str, str]:
        """Servicios configurados, en el orden estable usado para el desempate."""

        return {
            "mongo": self.mongo_service_url.rstrip("/"),
            "postgres": self.pg_service_url.rstrip("/"),
        }
