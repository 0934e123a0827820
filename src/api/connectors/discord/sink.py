"""Sink Discord: formata o evento e executa o webhook com wait=true.

`wait=true` pede confirmação síncrona da mensagem criada em vez de
fire-and-forget, para que erros do Discord cheguem como status HTTP.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.payload_builders.discord import DiscordMessagePayloadBuilder
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from utils.errors import SinkDeliveryError

if TYPE_CHECKING:
    from app.protocols.http_client import HttpPosterProtocol
    from app.protocols.models import Event
    from config.settings import DiscordSettings

logger = logging.getLogger(__name__)

SINK_NAME = "discord"


def build_execute_url(webhook_url: str) -> httpx.URL:
    """Acrescenta wait=true preservando os demais parâmetros da URL.

    Raises:
        SinkDeliveryError: Se a URL configurada não for parseável
    """
    try:
        return httpx.URL(webhook_url).copy_set_param("wait", "true")
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise SinkDeliveryError(SINK_NAME, "invalid_url") from exc


class DiscordSink:
    """Adapter Discord (SinkAdapterProtocol)."""

    name = SINK_NAME

    def __init__(
        self,
        webhook_url: str,
        timeout_seconds: float = 10.0,
        http_client: HttpPosterProtocol | None = None,
    ) -> None:
        self._webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds
        self._http = http_client or HttpClient(HttpClientConfig(timeout_seconds=timeout_seconds))
        self._builder = DiscordMessagePayloadBuilder()

    @property
    def enabled(self) -> bool:
        return bool(self._webhook_url)

    def format(self, event: Event) -> dict[str, Any]:
        return self._builder.build(event)

    async def deliver(self, payload: dict[str, Any]) -> None:
        """Executa o webhook; sem URL configurada não faz nada.

        Raises:
            SinkDeliveryError: Em URL inválida, erro de transporte ou status não-2xx
        """
        if not self.enabled:
            return

        url = build_execute_url(self._webhook_url)
        try:
            response = await self._http.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except HttpError as exc:
            raise SinkDeliveryError(SINK_NAME, str(exc), status_code=exc.status_code) from exc

        logger.debug(
            "discord_delivered",
            extra={
                "sink": SINK_NAME,
                "status_code": getattr(response, "status_code", None),
            },
        )


def create_discord_sink(
    settings: DiscordSettings,
    http_client: HttpPosterProtocol | None = None,
) -> DiscordSink:
    """Factory a partir de DiscordSettings."""
    return DiscordSink(
        webhook_url=settings.webhook_url,
        timeout_seconds=settings.request_timeout_seconds,
        http_client=http_client,
    )
