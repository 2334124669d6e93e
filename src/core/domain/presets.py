"""Feed presets for feedpass.

This module centralizes the word-list sources shipped with the application.
Keeping it in the domain layer lets the CLI, the settings object and the
services share a single source of truth without importing adapters.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from core.domain.models import DEFAULT_CACHE_FILE, WordListConfig


class Preset(str, Enum):
    """Supported feed presets."""

    GERMAN = "de"
    ENGLISH = "en"

    @classmethod
    def default(cls) -> "Preset":
        """Return the preset used when nothing else is configured."""

        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for tables and prompts."""

        return "German" if self is Preset.GERMAN else "English"

    @property
    def source_url(self) -> str:
        return _PRESET_SOURCES[self][0]

    @property
    def min_word_length(self) -> int:
        return _PRESET_SOURCES[self][1]

    @property
    def max_word_length(self) -> int:
        return _PRESET_SOURCES[self][2]

    def config(
        self,
        *,
        cache_file_path: Path = DEFAULT_CACHE_FILE,
        max_redirects: int = 2,
        connect_timeout_seconds: float = 5.0,
    ) -> WordListConfig:
        """Build a `WordListConfig` with this preset's source and word lengths."""

        return WordListConfig(
            source_url=self.source_url,
            min_word_length=self.min_word_length,
            max_word_length=self.max_word_length,
            cache_file_path=cache_file_path,
            max_redirects=max_redirects,
            connect_timeout_seconds=connect_timeout_seconds,
        )


# (url, min length, max length)
_PRESET_SOURCES: dict[Preset, tuple[str, int, int]] = {
    Preset.GERMAN: ("https://www.tagesschau.de/newsticker.rdf", 8, 15),
    Preset.ENGLISH: ("https://rss.dw.com/rdf/rss-en-all", 4, 12),
}
