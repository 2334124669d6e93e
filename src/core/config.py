"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los adaptadores (HTTP/caché) y los servicios leen la misma configuración.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import DEFAULT_CACHE_FILE, WordListConfig
from core.domain.presets import Preset

APP_NAME = "feedpass"
APP_VERSION = "0.1.0"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (Windows, macOS, XDG)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=VALUE lines, ignoring blanks, comments and surrounding quotes."""

    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Merge `values` into the per-user .env file and return its path.

    Keys mapped to None are left untouched; keys mapped to "" are removed.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = read_env_file(env_path)

    for key, value in values.items():
        if value is None:
            continue
        if value == "":
            existing.pop(key, None)
        else:
            existing[key] = value

    lines = ["# feedpass user config (.env)"]
    lines.extend(f"{key}={existing[key]}" for key in sorted(existing))
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para CLI, adaptadores y servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDPASS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    preset: Preset = Field(
        default=Preset.ENGLISH,
        description="Preset de feed por defecto (de/en).",
    )
    source_url: str | None = Field(
        default=None,
        description="URL de feed que sustituye a la del preset.",
    )
    min_word_length: int | None = Field(
        default=None,
        ge=1,
        description="Longitud mínima de palabra (sustituye a la del preset).",
    )
    max_word_length: int | None = Field(
        default=None,
        ge=1,
        description="Longitud máxima de palabra (sustituye a la del preset).",
    )
    cache_file_path: Path = Field(
        default=DEFAULT_CACHE_FILE,
        description="Ruta del fichero JSON de caché de la lista de palabras.",
    )
    max_redirects: int = Field(
        default=2,
        ge=0,
        le=20,
        description="Redirecciones HTTP a seguir (0 las desactiva).",
    )
    connect_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout de conexión (segundos).",
    )
    read_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout de lectura/escritura/pool por request (segundos).",
    )
    user_agent: str = Field(
        default="feedpass/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para descargar el feed.",
    )
    verbose: bool = Field(
        default=False,
        description="Emitir avisos cuando el feed falla y se usa la caché.",
    )

    def wordlist_config(self, preset: Preset | None = None) -> WordListConfig:
        """Combine preset defaults with any explicit overrides from the environment."""

        preset = preset or self.preset
        return WordListConfig(
            source_url=self.source_url or preset.source_url,
            min_word_length=self.min_word_length or preset.min_word_length,
            max_word_length=self.max_word_length or preset.max_word_length,
            cache_file_path=self.cache_file_path,
            max_redirects=self.max_redirects,
            connect_timeout_seconds=self.connect_timeout_seconds,
        )
