"""Wrapper de httpx para descargar el feed.

Por qué un wrapper:
- Estandariza timeouts, headers y la política de redirecciones.
- Convierte las excepciones de red en un `FetchResult` explícito.
- Facilita testeo: se puede inyectar un `httpx.Client` con `MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.models import WordListConfig
from core.domain.results import FailureKind, FetchResult

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    config: WordListConfig | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros para feeds.

    `config` (si se da) manda sobre `settings` en timeout de conexión y
    redirecciones; 0 redirecciones desactiva el seguimiento.
    """

    settings = settings or AppSettings()
    connect_timeout = config.connect_timeout_seconds if config else settings.connect_timeout_seconds
    max_redirects = config.max_redirects if config else settings.max_redirects

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/rss+xml,application/rdf+xml,application/xml;q=0.9,text/xml;q=0.8,*/*;q=0.5",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.read_timeout_seconds, connect=connect_timeout),
        follow_redirects=max_redirects > 0,
        max_redirects=max_redirects,
        headers=headers,
        transport=transport,
    )


class HttpFeedFetcher:
    """`FeedFetcher` backed by httpx.

    A caller-provided client is reused and never closed here; otherwise a
    short-lived client is built per fetch.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        config: WordListConfig | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._config = config
        self._client = client

    def fetch(self, url: str) -> FetchResult:
        try:
            if self._client is not None:
                response = self._client.get(url)
            else:
                with build_client(self._settings, self._config) as client:
                    response = client.get(url)
        except httpx.TimeoutException as exc:
            return FetchResult.failed(FailureKind.TIMEOUT, f"timeout fetching {url}: {exc}")
        except httpx.HTTPError as exc:
            return FetchResult.failed(FailureKind.NETWORK, f"error fetching {url}: {exc}")
        except (httpx.InvalidURL, UnicodeError) as exc:
            # bad URL or a non-ASCII header value
            return FetchResult.failed(FailureKind.NETWORK, f"cannot request {url!r}: {exc}")

        if not response.is_success:
            return FetchResult.failed(
                FailureKind.HTTP_STATUS,
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
            )

        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return FetchResult.success(response.content, status_code=response.status_code)
