"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Resuelve las rutas de los dos documentos TOML (usuario y boards) según las
  convenciones de cada sistema operativo.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import validation_error

APP_DIR_NAME = "mlog"
USER_CONF_FILENAME = "config.toml"
BOARDS_CONF_FILENAME = "boards.toml"


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


def get_user_data_dir() -> Path:
    """Directorio de datos por usuario; aquí vive `boards.toml`."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("LOCALAPPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".local" / "share" / APP_DIR_NAME


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Credentials never live here: they come from the user TOML document. These
    settings only pin endpoints, timeouts and file locations.
    """

    model_config = SettingsConfigDict(
        env_prefix="MLOG_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default="https://api.monday.com/v2/",
        min_length=8,
        description="GraphQL endpoint of the board service.",
    )
    api_version: str | None = Field(
        default="2023-10",
        description="Value of the API-Version header; empty disables the header.",
    )
    board_host: str = Field(
        default="magicboard.monday.com",
        min_length=1,
        description="Host used to build absolute pulse links.",
    )
    boards_update_url: str = Field(
        default="https://denis-engcom.github.io/mlog/boards.toml",
        min_length=8,
        description="Where `mlog update` downloads the latest boards document.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="mlog/0.3 (+https://github.com/denis-engcom/mlog)",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    config_dir: Path | None = Field(
        default=None,
        description="Override for the directory holding config.toml.",
    )
    data_dir: Path | None = Field(
        default=None,
        description="Override for the directory holding boards.toml.",
    )


def load_settings() -> AppSettings:
    """Build `AppSettings` from the environment; bad `MLOG_*` values are a validation error."""

    try:
        return AppSettings()
    except ValidationError as exc:
        raise validation_error("Invalid MLOG_* environment setting. Run with --debug for details. Exiting.", exc) from exc


@dataclass(frozen=True)
class ConfPaths:
    """Locations of the two configuration documents."""

    user_conf: Path
    boards_conf: Path


def resolve_conf_paths(settings: AppSettings) -> ConfPaths:
    config_dir = settings.config_dir or get_user_config_dir()
    data_dir = settings.data_dir or get_user_data_dir()
    return ConfPaths(
        user_conf=config_dir / USER_CONF_FILENAME,
        boards_conf=data_dir / BOARDS_CONF_FILENAME,
    )
