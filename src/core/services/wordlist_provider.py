"""Construcción de la lista de palabras (feed -> filtro -> caché).

This module owns the acquisition pipeline: cache preference, fetch, parse,
persist and the cache fallback. Nothing here raises for network, parse or
cache trouble; every such problem becomes a message on the warning sink and
the provider degrades to the cache or to an empty list. Only configuration
errors escape, and only when a fetch is actually attempted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from adapters.feed_parser import parse_feed
from adapters.http_client import HttpFeedFetcher
from adapters.wordlist_cache import load_wordlist, save_wordlist
from core.domain.models import WordListConfig
from core.domain.results import FailureKind
from core.interfaces.fetcher import FeedFetcher, WarningSink

logger = logging.getLogger(__name__)


def default_warning_sink(verbose: bool) -> WarningSink:
    """Log warnings when verbose, drop them otherwise."""

    if verbose:
        return logger.warning
    return lambda message: None


@dataclass
class BuildReport:
    """What happened during the last `build` call."""

    source: str = "none"  # "cache", "feed" or "none"
    failure: FailureKind | None = None
    warnings: list[str] = field(default_factory=list)


class WordListProvider:
    """Builds word lists from a feed with a JSON cache fallback."""

    def __init__(
        self,
        *,
        fetcher_factory: Callable[[WordListConfig], FeedFetcher] | None = None,
        warning: WarningSink | None = None,
        verbose: bool = False,
    ) -> None:
        self._fetcher_factory = fetcher_factory or (lambda config: HttpFeedFetcher(config=config))
        self._warning = warning or default_warning_sink(verbose)
        self.last_report = BuildReport()

    def _warn(self, message: str) -> None:
        self.last_report.warnings.append(message)
        self._warning(message)

    def load_cache(self, config: WordListConfig, *, warn: bool = True) -> list[str]:
        loaded = load_wordlist(config.cache_file_path)
        if loaded.problem and warn:
            self._warn(loaded.problem)
        return loaded.words

    def build(self, config: WordListConfig, prefer_cache: bool = False) -> list[str]:
        """Return a word list for `config`.

        With `prefer_cache` a non-empty cache short-circuits the network.
        Raises `ConfigError` when a fetch is needed and `config` is invalid.
        """

        self.last_report = BuildReport()

        if prefer_cache:
            words = self.load_cache(config, warn=False)
            if words:
                self.last_report.source = "cache"
                return words

        config.validate_for_fetch()

        words = self._fetch_words(config)
        if words:
            try:
                save_wordlist(words, config.cache_file_path)
            except OSError as exc:
                self._warn(f"cannot write cache file {config.cache_file_path}: {exc}")
            self.last_report.source = "feed"
            return words

        words = self.load_cache(config)
        self.last_report.source = "cache" if words else "none"
        return words

    def _fetch_words(self, config: WordListConfig) -> list[str]:
        fetcher = self._fetcher_factory(config)

        fetched = fetcher.fetch(config.source_url)
        if not fetched.ok:
            self.last_report.failure = fetched.failure
            self._warn(f"fetch failed ({fetched.failure.value}): {fetched.detail}; falling back to cache")
            return []

        parsed = parse_feed(fetched.body, config)
        if not parsed.ok:
            self.last_report.failure = parsed.failure
            self._warn(f"parse failed ({parsed.failure.value}): {parsed.detail}; falling back to cache")
            return []

        logger.info(
            "Built word list of %d words from %d descriptions at %s",
            len(parsed.words),
            parsed.descriptions_seen,
            config.source_url,
        )
        return parsed.words
