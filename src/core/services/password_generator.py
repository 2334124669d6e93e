"""Generador de contraseñas memorables a partir de un patrón.

Pattern mini-language, read left to right, fragments joined with no
separator:

- ``i``: an integer between 1 and 999
- ``s``: a punctuation character, ASCII 33 (``!``) to 47 (``/``)
- ``w``: a word from the word list (with replacement)

The word list is built once per instance; repeated `generate` calls reuse it
and only fall back to re-reading the cache file while it is empty.
"""

from __future__ import annotations

import re
import secrets
from pathlib import Path
from typing import Callable

from core.domain.models import DEFAULT_CACHE_FILE, WordListConfig
from core.domain.presets import Preset
from core.errors import InvalidPatternError, MissingWordListError
from core.services.wordlist_provider import WordListProvider

DEFAULT_PATTERN = "wisw"
PATTERN_RE = re.compile(r"^[isw]+$")

INT_RANGE = (1, 999)
SYMBOL_RANGE = (33, 47)

RandInt = Callable[[int, int], int]


def uniform_int(low: int, high: int) -> int:
    """Uniform integer in the closed range [low, high] from the OS CSPRNG."""

    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    return low + secrets.randbelow(high - low + 1)


def validate_pattern(pattern: str) -> str:
    if not isinstance(pattern, str) or not PATTERN_RE.fullmatch(pattern):
        raise InvalidPatternError(pattern)
    return pattern


class PasswordGenerator:
    """Renders passwords from a pattern using a feed-backed word list."""

    def __init__(
        self,
        config: WordListConfig,
        words: list[str] | None = None,
        *,
        provider: WordListProvider | None = None,
        randint: RandInt = uniform_int,
    ) -> None:
        self.config = config
        self._words: list[str] = list(words or [])
        self._provider = provider or WordListProvider()
        self._randint = randint

    @classmethod
    def from_config(
        cls,
        config: WordListConfig,
        *,
        prefer_cache: bool = False,
        provider: WordListProvider | None = None,
        randint: RandInt = uniform_int,
    ) -> "PasswordGenerator":
        """Fetch (or reuse the cache) now; raises `ConfigError` on a bad config."""

        provider = provider or WordListProvider()
        words = provider.build(config, prefer_cache=prefer_cache)
        return cls(config, words, provider=provider, randint=randint)

    @classmethod
    def from_preset(
        cls,
        preset: Preset,
        *,
        cache_file_path: Path = DEFAULT_CACHE_FILE,
        provider: WordListProvider | None = None,
    ) -> "PasswordGenerator":
        return cls.from_config(preset.config(cache_file_path=cache_file_path), provider=provider)

    @classmethod
    def cached(
        cls,
        cache_file_path: Path = DEFAULT_CACHE_FILE,
        *,
        provider: WordListProvider | None = None,
        randint: RandInt = uniform_int,
    ) -> "PasswordGenerator":
        """Cache-only generator: never touches the network."""

        config = WordListConfig(cache_file_path=cache_file_path)
        provider = provider or WordListProvider()
        words = provider.load_cache(config)
        return cls(config, words, provider=provider, randint=randint)

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self._words)

    def _ensure_words(self) -> list[str]:
        if not self._words:
            self._words = self._provider.load_cache(self.config)
        if not self._words:
            raise MissingWordListError(self.config.cache_file_path)
        return self._words

    def _fragment(self, directive: str, words: list[str]) -> str:
        if directive == "i":
            return str(self._randint(*INT_RANGE))
        if directive == "s":
            return chr(self._randint(*SYMBOL_RANGE))
        return words[self._randint(0, len(words) - 1)]

    def generate(self, pattern: str = DEFAULT_PATTERN) -> str:
        """Render one password for `pattern`.

        Raises `InvalidPatternError` for anything outside ``[isw]+`` and
        `MissingWordListError` when neither memory nor cache has words.
        """

        validate_pattern(pattern)
        words = self._ensure_words()
        return "".join(self._fragment(directive, words) for directive in pattern)

    def generate_many(self, count: int, pattern: str = DEFAULT_PATTERN) -> list[str]:
        if count < 1:
            raise ValueError("count must be >= 1")
        validate_pattern(pattern)
        return [self.generate(pattern) for _ in range(count)]
