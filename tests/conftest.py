"""
Shared pytest fixtures for feedpass tests.

Provides sample feeds (RSS 2.0 and RSS 1.0/RDF), a counting fetcher double
and helpers for temporary cache files.
"""
import json

import pytest

from core.config import AppSettings
from core.domain.models import WordListConfig
from core.domain.results import FailureKind, FetchResult


RSS_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example News</title>
    <description>Daily headlines</description>
    <item>
      <title>Storm hits harbor</title>
      <description>A STORM reached the harbor, flooding "Streets"; officials said: stay inside!</description>
    </item>
    <item>
      <title>Markets</title>
      <description><![CDATA[<p>Markets rallied on <b>Monday</b> after 3 days of losses.</p>]]></description>
    </item>
  </channel>
</rss>
"""

RSS_WORDS = [
    "After",
    "Daily",
    "Days",
    "Flooding",
    "Harbor",
    "Headlines",
    "Inside",
    "Losses",
    "Markets",
    "Monday",
    "Officials",
    "Rallied",
    "Reached",
    "Said",
    "Stay",
    "Storm",
    "Streets",
]

RDF_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#" xmlns="http://purl.org/rss/1.0/">
  <channel rdf:about="https://example.org/">
    <title>Nachrichten</title>
    <description>Aktuelle Meldungen</description>
  </channel>
  <item rdf:about="https://example.org/1">
    <title>Bundestag</title>
    <description>Der Bundestag beschließt „Haushaltsgesetz“ nach langer Debatte.</description>
  </item>
</rdf:RDF>
""".encode("utf-8")

FEED_URL = "https://news.example.org/feed.xml"


class CountingFetcher:
    """FeedFetcher double that returns a canned result and counts calls."""

    def __init__(self, result: FetchResult):
        self.result = result
        self.calls = []

    def fetch(self, url):
        self.calls.append(url)
        return self.result


@pytest.fixture(autouse=True)
def no_env_files(monkeypatch):
    """Keep .env files (project and per-user) out of every test."""
    monkeypatch.setitem(AppSettings.model_config, "env_file", None)


@pytest.fixture
def cache_file(tmp_path):
    return tmp_path / "cache" / "wordlist.json"


@pytest.fixture
def write_cache(cache_file):
    """Write a list (or raw text) to the temporary cache file."""

    def _write(content):
        cache_file.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            cache_file.write_text(content, encoding="utf-8")
        else:
            cache_file.write_text(json.dumps(content), encoding="utf-8")
        return cache_file

    return _write


@pytest.fixture
def config(cache_file):
    return WordListConfig(
        source_url=FEED_URL,
        min_word_length=4,
        max_word_length=12,
        cache_file_path=cache_file,
    )


@pytest.fixture
def rss_fetcher():
    return CountingFetcher(FetchResult.success(RSS_FEED, status_code=200))


@pytest.fixture
def failing_fetcher():
    return CountingFetcher(FetchResult.failed(FailureKind.NETWORK, "connection refused"))
