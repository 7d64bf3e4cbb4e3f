"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que servicios y adaptadores lean config de forma consistente.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (XDG, sin dependencias)."""

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tab-dispatch"
    return Path.home() / ".config" / "tab-dispatch"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="TAB_DISPATCH_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    desktop_env_var: str = Field(
        default="XDG_CURRENT_DESKTOP",
        min_length=1,
        description="Variable que anuncia la sesión de escritorio actual.",
    )
    presence_probe: str = Field(
        default="which",
        min_length=1,
        description="Comando que localiza un ejecutable en PATH.",
    )
    dispatch_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Límite de espera por proceso externo (None = sin límite).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como JSON en lugar de formato consola.",
    )
