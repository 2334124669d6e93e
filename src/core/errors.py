"""Errores públicos del Core.

Solo los problemas de configuración y de patrón llegan al llamador. Los fallos
de red, parseo o caché durante la construcción de la lista de palabras se
expresan como `FailureKind` dentro de un resultado (ver `core.domain.results`).
"""

from __future__ import annotations


class FeedPassError(Exception):
    """Base class for every error raised by feedpass."""


class ConfigError(FeedPassError, ValueError):
    """Invalid source URL or word length bounds when a fetch was requested."""


class InvalidPatternError(FeedPassError, ValueError):
    """The password pattern is empty or contains characters other than i/s/w."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"Invalid pattern: {pattern!r} (allowed directives: i, s, w)")
        self.pattern = pattern


class MissingWordListError(FeedPassError, LookupError):
    """No word list is available from memory, the feed, or the cache file."""

    def __init__(self, cache_file_path: object | None = None) -> None:
        message = "Missing word list."
        if cache_file_path is not None:
            message = f"Missing word list (no usable cache at {cache_file_path})."
        super().__init__(message)
        self.cache_file_path = cache_file_path
