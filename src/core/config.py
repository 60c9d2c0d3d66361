"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El adaptador de webpack y el doctor leen la misma configuración.
"""

from __future__ import annotations

import os
import shlex
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "sw-append"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "sw-append"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "sw-append"
    return Path.home() / ".config" / "sw-append"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Ojo: el `.env` que se lee aquí es el de la herramienta (prefijo
    `SW_APPEND_`). El `.env` del proyecto que se inyecta en el bundle lo
    consume dotenv-webpack, no esta clase.
    """

    model_config = SettingsConfigDict(
        env_prefix="SW_APPEND_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero, luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    bundler_command: str = Field(
        default="npx --no-install webpack",
        min_length=1,
        description="Comando que lanza webpack-cli (se le añaden --config y --json).",
    )
    bundler_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout del bundler (segundos). Sin valor, se espera indefinidamente.",
    )
    env_file: Path = Field(
        default=Path(".env"),
        description="Valor por defecto de --env.",
    )
    tsconfig: Path = Field(
        default=Path("tsconfig.json"),
        description="Valor por defecto de --tsconfig.",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner en modo interactivo.",
    )

    @field_validator("bundler_command")
    @classmethod
    def _command_not_blank(cls, value: str) -> str:
        if not shlex.split(value):
            raise ValueError("bundler_command must contain an executable")
        return value

    def bundler_argv(self) -> list[str]:
        return shlex.split(self.bundler_command)
