"""Wiring dos sinks concretos (único ponto que acopla app <-> api)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.discord import create_discord_sink
from api.connectors.teams import create_teams_sink
from app.services.dispatcher import EventDispatcher

if TYPE_CHECKING:
    from app.protocols.http_client import HttpPosterProtocol
    from app.protocols.sink import SinkAdapterProtocol
    from config.settings import RelayConfig

logger = logging.getLogger(__name__)


def create_sinks(
    config: RelayConfig,
    http_client: HttpPosterProtocol | None = None,
) -> list[SinkAdapterProtocol]:
    """Cria todos os sinks conhecidos; sem URL, o sink fica desabilitado."""
    sinks: list[SinkAdapterProtocol] = [
        create_teams_sink(config.teams, http_client=http_client),
        create_discord_sink(config.discord, http_client=http_client),
    ]
    for sink in sinks:
        if not sink.enabled:
            logger.info("sink_disabled", extra={"sink": sink.name, "reason": "not_configured"})
    return sinks


def create_dispatcher(
    config: RelayConfig,
    http_client: HttpPosterProtocol | None = None,
) -> EventDispatcher:
    """Monta o dispatcher com os sinks derivados da configuração."""
    dispatcher = EventDispatcher(create_sinks(config, http_client=http_client))
    logger.info(
        "dispatcher_ready",
        extra={"component": "bootstrap", "enabled_sinks": dispatcher.enabled_sinks},
    )
    return dispatcher
