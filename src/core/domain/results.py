"""Result objects for the fetch and parse steps.

Fetching and parsing never raise for expected trouble (network down, bad
status, malformed XML). They return one of these objects and the provider
decides how to recover.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FailureKind(str, Enum):
    """Why a fresh word list could not be built from the feed."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    EMPTY_BODY = "empty_body"
    PARSE = "parse"
    NO_WORDS = "no_words"


@dataclass
class FetchResult:
    """Raw feed body or the reason it could not be fetched."""

    body: bytes = b""
    failure: FailureKind | None = None
    detail: str = ""
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, body: bytes, *, status_code: int | None = None) -> "FetchResult":
        if not body or not body.strip():
            return cls(failure=FailureKind.EMPTY_BODY, detail="empty response body", status_code=status_code)
        return cls(body=body, status_code=status_code)

    @classmethod
    def failed(cls, kind: FailureKind, detail: str, *, status_code: int | None = None) -> "FetchResult":
        return cls(failure=kind, detail=detail, status_code=status_code)


@dataclass
class ParseResult:
    """Words accepted from a feed body or the reason parsing failed."""

    words: list[str] = field(default_factory=list)
    failure: FailureKind | None = None
    detail: str = ""
    descriptions_seen: int = 0

    @property
    def ok(self) -> bool:
        return self.failure is None
