"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- La CLI y los adaptadores leen los mismos defaults (nombre del tsconfig,
  indentación del JSON, nivel de log).
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Variables de entorno con prefijo `TSCONFIG_SWC_` (p.ej.
    `TSCONFIG_SWC_JSON_INDENT=4`), también leídas desde un `.env` local.
    """

    model_config = SettingsConfigDict(
        env_prefix="TSCONFIG_SWC_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    tsconfig_filename: str = Field(
        default="tsconfig.json",
        min_length=1,
        description="Nombre del tsconfig que se busca desde el cwd hacia arriba.",
    )
    swcrc_filename: str = Field(
        default=".swcrc",
        min_length=1,
        description="Nombre del archivo de salida cuando `--output` apunta a un directorio.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentación del JSON emitido.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI cuando no se usa --verbose.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level
