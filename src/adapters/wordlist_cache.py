"""Caché JSON de la lista de palabras.

Formato: un array JSON de strings, UTF-8, sobrescrito en cada fetch válido.
La lectura valida el esquema (array de strings) con Pydantic; un fichero
ausente o corrupto se trata como caché vacía.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from core.domain.models import CachedWordList

logger = logging.getLogger(__name__)


@dataclass
class CacheLoad:
    """Words read from the cache file; `problem` explains an empty result."""

    words: list[str]
    problem: str | None = None


def load_wordlist(path: Path) -> CacheLoad:
    if not path.is_file():
        return CacheLoad(words=[], problem=f"cache file {path} does not exist")

    try:
        raw = path.read_bytes()
    except OSError as exc:
        return CacheLoad(words=[], problem=f"cannot read cache file {path}: {exc}")

    try:
        cached = CachedWordList.from_json(raw)
    except ValidationError as exc:
        return CacheLoad(
            words=[],
            problem=f"malformed cache file {path}: {exc.error_count()} validation error(s)",
        )

    words = [w for w in cached.words if w.strip()]
    if not words:
        return CacheLoad(words=[], problem=f"cache file {path} holds no words")
    logger.debug("Loaded %d words from %s", len(words), path)
    return CacheLoad(words=words)


def save_wordlist(words: list[str], path: Path) -> Path:
    """Write `words` as a JSON array, replacing any previous cache."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(words, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.debug("Saved %d words to %s", len(words), path)
    return path
