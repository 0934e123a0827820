"""Sink Microsoft Teams: formata o evento e publica no Incoming Webhook."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.teams import TeamsCardPayloadBuilder
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from utils.errors import SinkDeliveryError

if TYPE_CHECKING:
    from app.protocols.http_client import HttpPosterProtocol
    from app.protocols.models import Event
    from config.settings import TeamsSettings

logger = logging.getLogger(__name__)

SINK_NAME = "teams"


class TeamsSink:
    """Adapter Teams (SinkAdapterProtocol)."""

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
        self._builder = TeamsCardPayloadBuilder()

    @property
    def enabled(self) -> bool:
        return bool(self._webhook_url)

    def format(self, event: Event) -> dict[str, Any]:
        return self._builder.build(event)

    async def deliver(self, payload: dict[str, Any]) -> None:
        """Publica o card; sem URL configurada não faz nada.

        Raises:
            SinkDeliveryError: Em erro de transporte ou status não-2xx
        """
        if not self.enabled:
            return

        try:
            response = await self._http.post(self._webhook_url, json=payload)
        except HttpError as exc:
            raise SinkDeliveryError(SINK_NAME, str(exc), status_code=exc.status_code) from exc

        logger.debug(
            "teams_delivered",
            extra={
                "sink": SINK_NAME,
                "status_code": getattr(response, "status_code", None),
                "teams_correlation_id": payload.get("correlationId"),
            },
        )


def create_teams_sink(
    settings: TeamsSettings,
    http_client: HttpPosterProtocol | None = None,
) -> TeamsSink:
    """Factory a partir de TeamsSettings."""
    return TeamsSink(
        webhook_url=settings.webhook_url,
        timeout_seconds=settings.request_timeout_seconds,
        http_client=http_client,
    )
