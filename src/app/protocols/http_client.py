"""Protocolos HTTP usados pelos sinks.

Evita dependência direta do cliente concreto fora de app/infra.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import httpx


class HttpPosterProtocol(Protocol):
    """Contrato mínimo para POST JSON com uma única tentativa."""

    async def post(
        self,
        url: str | httpx.URL,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> Any: ...
