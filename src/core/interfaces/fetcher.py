"""Contratos de obtención del feed y avisos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente HTTP por un doble en tests (contador de fetch).
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from core.domain.results import FetchResult

WarningSink = Callable[[str], None]


@runtime_checkable
class FeedFetcher(Protocol):
    """Contrato mínimo para descargar el feed.

    Reglas de diseño:
    - `fetch` es síncrono: una sola petición por construcción de lista.
    - Nunca lanza por errores de red; devuelve un `FetchResult` con el motivo.
    """

    def fetch(self, url: str) -> FetchResult:
        """Descarga `url` y devuelve el cuerpo o el motivo del fallo."""

        ...
