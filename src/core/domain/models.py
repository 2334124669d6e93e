"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- La configuración de la lista de palabras es un registro tipado con defaults
  validados, en vez de propiedades asignadas desde un mapa libre.
- Los mismos modelos validan el contenido del fichero de caché.

Nota:
- Estos modelos describen *qué* se configura, no *cómo* se obtiene la lista.
"""

from __future__ import annotations

from pathlib import Path

import httpx
from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, ValidationError
from pydantic.config import ConfigDict

from core.errors import ConfigError

DEFAULT_CACHE_FILE = Path("wordlist.json")

_HTTP_URL = TypeAdapter(HttpUrl)


class WordListConfig(BaseModel):
    """Parámetros de obtención, filtrado y caché de la lista de palabras.

    Las invariantes de URL y longitudes solo se comprueban cuando se pide un
    fetch (`validate_for_fetch`): el modo solo-caché no necesita URL.
    """

    model_config = ConfigDict(frozen=True)

    source_url: str | None = Field(
        default=None,
        description="URL del feed XML/RSS cuyos nodos `description` alimentan la lista.",
    )
    min_word_length: int = Field(
        default=4,
        ge=1,
        description="Longitud mínima (inclusive) de una palabra aceptada.",
    )
    max_word_length: int = Field(
        default=12,
        ge=1,
        description="Longitud máxima (inclusive) de una palabra aceptada.",
    )
    cache_file_path: Path = Field(
        default=DEFAULT_CACHE_FILE,
        description="Fichero JSON donde se persiste la última lista válida.",
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
        description="Timeout de conexión del GET (segundos).",
    )

    def validate_for_fetch(self) -> None:
        """Raise `ConfigError` unless the config can be used to fetch the feed."""

        if not self.source_url:
            raise ConfigError(f"Invalid URL: {self.source_url!r}")
        try:
            _HTTP_URL.validate_python(self.source_url)
            url = httpx.URL(self.source_url)
            # empty labels ("a..b") only fail at DNS lookup otherwise
            url.host.encode("idna")
        except (ValidationError, httpx.InvalidURL, UnicodeError) as exc:
            raise ConfigError(f"Invalid URL: {self.source_url!r}") from exc
        if self.min_word_length > self.max_word_length:
            raise ConfigError(
                f"Invalid word lengths: min={self.min_word_length} max={self.max_word_length}"
            )

    def accepts_length(self, length: int) -> bool:
        return self.min_word_length <= length <= self.max_word_length


class CachedWordList(BaseModel):
    """Contenido del fichero de caché: un array JSON de strings."""

    words: list[str] = Field(default_factory=list)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "CachedWordList":
        return cls(words=_WORD_ARRAY.validate_json(raw))


_WORD_ARRAY = TypeAdapter(list[str])
