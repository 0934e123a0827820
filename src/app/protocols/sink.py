"""Protocolo de sink (adapter format + deliver por provedor)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import Event


class SinkAdapterProtocol(Protocol):
    """Contrato mínimo de um sink de notificação.

    `format` é puro; `deliver` faz uma única tentativa e levanta
    SinkDeliveryError em qualquer falha. Sem endpoint, `enabled` é
    False e `deliver` não faz nada.
    """

    name: str
    timeout_seconds: float

    @property
    def enabled(self) -> bool: ...

    def format(self, event: Event) -> dict[str, Any]: ...

    async def deliver(self, payload: dict[str, Any]) -> None: ...
