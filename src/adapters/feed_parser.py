"""Extracción de palabras desde un feed XML (RSS 1.0/RDF, RSS 2.0).

Solo se leen los nodos `description`. El XML se parsea en modo estricto con
lxml: un documento mal formado es un fallo de parseo, no una lista vacía.
HTML embebido en la descripción se reduce a texto con BeautifulSoup.
"""

from __future__ import annotations

import string
from typing import Iterable, Iterator

from bs4 import BeautifulSoup
from lxml import etree

from core.domain.models import WordListConfig
from core.domain.results import FailureKind, ParseResult

# ASCII punctuation plus the typographic quotes German and English feeds use.
STRIP_CHARS = ",.;:?!'\"„“”‘’‚«»" + string.whitespace


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


def iter_descriptions(body: bytes) -> Iterator[str]:
    """Yield the text content of every unprefixed `description` element.

    The default namespace counts (RSS 1.0/RDF); prefixed ones such as
    `media:description` or `dc:description` are skipped.

    Raises `lxml.etree.XMLSyntaxError` on malformed input.
    """

    root = etree.fromstring(body, _xml_parser())
    for element in root.iter("{*}description"):
        if element.prefix is not None:
            continue
        text = "".join(element.itertext())
        if "<" in text:
            text = BeautifulSoup(text, "html.parser").get_text(" ")
        yield text


def clean_word(raw: str) -> str:
    return raw.strip(STRIP_CHARS)


def normalize_word(word: str) -> str:
    """`tAGESSCHAU` -> `Tagesschau`: first letter upper, rest lower."""

    return word[:1].upper() + word[1:].lower()


def accept_word(word: str, config: WordListConfig) -> bool:
    return config.accepts_length(len(word)) and word.isascii() and word.isalpha()


def extract_words(texts: Iterable[str], config: WordListConfig) -> list[str]:
    """Filter, normalize and deduplicate words; the result is sorted."""

    accepted: set[str] = set()
    for text in texts:
        for raw in text.split():
            word = clean_word(raw)
            if accept_word(word, config):
                accepted.add(normalize_word(word))
    return sorted(accepted)


def parse_feed(body: bytes, config: WordListConfig) -> ParseResult:
    """Parse a feed body into a `ParseResult`; never raises for bad XML."""

    try:
        descriptions = list(iter_descriptions(body))
    except etree.XMLSyntaxError as exc:
        return ParseResult(failure=FailureKind.PARSE, detail=f"malformed XML: {exc}")

    words = extract_words(descriptions, config)
    if not words:
        return ParseResult(
            failure=FailureKind.NO_WORDS,
            detail=f"no usable words in {len(descriptions)} description element(s)",
            descriptions_seen=len(descriptions),
        )
    return ParseResult(words=words, descriptions_seen=len(descriptions))
