"""Tests for pattern rendering and word-list reuse."""
import re

import pytest

from core.domain.models import WordListConfig
from core.domain.presets import Preset
from core.errors import InvalidPatternError, MissingWordListError
from core.services.password_generator import PasswordGenerator, uniform_int, validate_pattern
from core.services.wordlist_provider import WordListProvider

from conftest import RSS_WORDS

TRIALS = 500


@pytest.fixture
def generator(cache_file):
    return PasswordGenerator(WordListConfig(cache_file_path=cache_file), ["Alpha", "Beta", "Gamma"])


def test_symbol_directive_stays_in_ascii_punctuation_range(generator):
    for _ in range(TRIALS):
        symbol = generator.generate("s")
        assert len(symbol) == 1
        assert 33 <= ord(symbol) <= 47


def test_integer_directive_stays_in_range(generator):
    for _ in range(TRIALS):
        number = generator.generate("i")
        assert re.fullmatch(r"[1-9]\d{0,2}", number)
        assert 1 <= int(number) <= 999


def test_word_directive_picks_from_list(generator):
    for _ in range(TRIALS):
        word = generator.generate("w")
        assert word in generator.words
        assert word[0].isupper()
        assert word[1:] == word[1:].lower()


def test_default_pattern_is_word_int_symbol_word(generator):
    for _ in range(50):
        password = generator.generate()
        assert re.fullmatch(r"(Alpha|Beta|Gamma)[1-9]\d{0,2}[!-/](Alpha|Beta|Gamma)", password)


def test_length_is_sum_of_fragments(cache_file):
    generator = PasswordGenerator(WordListConfig(cache_file_path=cache_file), ["Harbor"])

    for _ in range(50):
        password = generator.generate("wswiw")
        digits = re.fullmatch(r"Harbor[!-/]Harbor(\d+)Harbor", password).group(1)
        assert len(password) == 6 + 1 + 6 + len(digits) + 6
        assert 1 <= len(digits) <= 3


def test_fragments_follow_pattern_order_with_injected_randint(cache_file):
    generator = PasswordGenerator(
        WordListConfig(cache_file_path=cache_file),
        ["Alpha", "Beta"],
        randint=lambda low, high: high,
    )

    assert generator.generate("wisw") == "Beta999/Beta"
    assert generator.generate("iwsi") == "999Beta/999"


@pytest.mark.parametrize("pattern", ["", "wx", "W", "w i", "wisw\n", "abc"])
def test_invalid_patterns_are_rejected(generator, pattern):
    with pytest.raises(InvalidPatternError):
        generator.generate(pattern)


def test_pattern_is_checked_before_word_list(cache_file):
    generator = PasswordGenerator(WordListConfig(cache_file_path=cache_file))

    with pytest.raises(InvalidPatternError):
        generator.generate("wx")


def test_validate_pattern_returns_valid_patterns():
    assert validate_pattern("iswsiw") == "iswsiw"


def test_cache_only_generator_uses_cached_words(write_cache, cache_file):
    write_cache(["Alpha", "Beta"])
    generator = PasswordGenerator.cached(cache_file)

    for _ in range(100):
        assert generator.generate("w") in {"Alpha", "Beta"}


def test_missing_word_list_raises(cache_file):
    generator = PasswordGenerator.cached(cache_file)

    with pytest.raises(MissingWordListError):
        generator.generate()


def test_empty_list_is_reloaded_lazily_from_cache(write_cache, cache_file):
    generator = PasswordGenerator.cached(cache_file)
    assert generator.words == ()

    write_cache(["Late"])

    assert generator.generate("w") == "Late"
    assert generator.words == ("Late",)


def test_three_generations_fetch_at_most_once(config, rss_fetcher):
    provider = WordListProvider(fetcher_factory=lambda c: rss_fetcher)
    generator = PasswordGenerator.from_config(config, provider=provider)

    for _ in range(3):
        generator.generate()

    assert len(rss_fetcher.calls) == 1


def test_fetched_list_round_trips_through_cache(config, rss_fetcher, cache_file):
    provider = WordListProvider(fetcher_factory=lambda c: rss_fetcher)
    fetched = PasswordGenerator.from_config(config, provider=provider)

    reloaded = PasswordGenerator.cached(cache_file)

    assert set(reloaded.words) == set(fetched.words) == set(RSS_WORDS)


def test_from_preset_uses_preset_source(cache_file, rss_fetcher):
    seen = []

    def factory(config):
        seen.append(config)
        return rss_fetcher

    PasswordGenerator.from_preset(Preset.GERMAN, cache_file_path=cache_file, provider=WordListProvider(fetcher_factory=factory))

    assert rss_fetcher.calls == [Preset.GERMAN.source_url]
    assert (seen[0].min_word_length, seen[0].max_word_length) == (8, 15)


def test_generate_many(generator):
    passwords = generator.generate_many(5, "ws")

    assert len(passwords) == 5
    with pytest.raises(ValueError):
        generator.generate_many(0)
    with pytest.raises(InvalidPatternError):
        generator.generate_many(2, "q")


def test_uniform_int_covers_closed_range():
    seen = {uniform_int(1, 3) for _ in range(TRIALS)}

    assert seen == {1, 2, 3}
    assert uniform_int(7, 7) == 7
    with pytest.raises(ValueError):
        uniform_int(5, 4)
