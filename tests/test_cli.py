"""Tests for the Typer CLI (no network: cache files and a fake fetcher)."""
import json

import pytest
from typer.testing import CliRunner

from cli.main import app
from core.domain.results import FetchResult

from conftest import RSS_FEED, RSS_WORDS

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for key in ("PRESET", "SOURCE_URL", "MIN_WORD_LENGTH", "MAX_WORD_LENGTH", "CACHE_FILE_PATH", "VERBOSE"):
        monkeypatch.delenv(f"FEEDPASS_{key}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_http(monkeypatch):
    """Replace the httpx fetcher used by the provider with a canned feed."""

    calls = []

    class FakeFetcher:
        def __init__(self, settings=None, config=None, **kwargs):
            pass

        def fetch(self, url):
            calls.append(url)
            return FetchResult.success(RSS_FEED, status_code=200)

    monkeypatch.setattr("core.services.wordlist_provider.HttpFeedFetcher", FakeFetcher)
    return calls


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "feedpass 0.1.0" in result.output


def test_generate_cached_json(write_cache, cache_file):
    write_cache(["Alpha", "Beta"])

    result = runner.invoke(
        app,
        ["generate", "--cached", "--cache-file", str(cache_file), "--pattern", "w", "--count", "5", "--json"],
    )

    assert result.exit_code == 0, result.output
    passwords = json.loads(result.stdout)
    assert len(passwords) == 5
    assert set(passwords) <= {"Alpha", "Beta"}


def test_generate_table_output(write_cache, cache_file):
    write_cache(["Alpha"])

    result = runner.invoke(app, ["generate", "--cached", "--cache-file", str(cache_file), "-p", "ww"])

    assert result.exit_code == 0, result.output
    assert "AlphaAlpha" in result.output


def test_generate_rejects_invalid_pattern(write_cache, cache_file):
    write_cache(["Alpha"])

    result = runner.invoke(app, ["generate", "--cached", "--cache-file", str(cache_file), "--pattern", "wx"])

    assert result.exit_code == 1
    assert "Invalid pattern" in result.output


def test_generate_without_any_word_list_fails(cache_file):
    result = runner.invoke(app, ["generate", "--cached", "--cache-file", str(cache_file)])

    assert result.exit_code == 1
    assert "Missing word list" in result.output


def test_generate_with_invalid_url_fails(cache_file):
    result = runner.invoke(app, ["generate", "--url", "not a url", "--cache-file", str(cache_file)])

    assert result.exit_code == 1
    assert "Invalid URL" in result.output


def test_generate_with_url_httpx_cannot_resolve_fails_cleanly(cache_file):
    result = runner.invoke(app, ["generate", "--url", "http://a..b/", "--cache-file", str(cache_file)])

    assert result.exit_code == 1
    assert "Invalid URL" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_generate_fetches_once_and_writes_cache(fake_http, cache_file):
    result = runner.invoke(
        app,
        ["generate", "--url", "https://news.example.org/feed.xml", "--cache-file", str(cache_file), "-n", "3", "--json"],
    )

    assert result.exit_code == 0, result.output
    assert fake_http == ["https://news.example.org/feed.xml"]
    assert json.loads(cache_file.read_text(encoding="utf-8")) == RSS_WORDS
    assert len(json.loads(result.stdout)) == 3


def test_words_from_cache(write_cache, cache_file):
    write_cache(["Alpha", "Beta"])

    result = runner.invoke(app, ["words", "--cached", "--cache-file", str(cache_file)])

    assert result.exit_code == 0, result.output
    assert "2 words" in result.output
    assert "source: cache" in result.output


def test_words_from_feed(fake_http, cache_file):
    result = runner.invoke(app, ["words", "--cache-file", str(cache_file), "--limit", "3"])

    assert result.exit_code == 0, result.output
    assert f"{len(RSS_WORDS)} words" in result.output
    assert "source: feed" in result.output
