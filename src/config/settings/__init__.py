"""Agregador de settings do relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Sink settings
from config.settings.discord import DiscordSettings, get_discord_settings
from config.settings.relay import RelayConfig, build_relay_config
from config.settings.teams import TeamsSettings, get_teams_settings

# Inbound webhook
from config.settings.webhook import (
    DEFAULT_SIGNATURE_HEADER,
    DispatchMode,
    WebhookSettings,
    get_webhook_settings,
)

__all__ = [
    # Constants
    "DEFAULT_PORT",
    "DEFAULT_SIGNATURE_HEADER",
    # Base
    "BaseSettings",
    # Sinks
    "DiscordSettings",
    "DispatchMode",
    "Environment",
    # Aggregate
    "RelayConfig",
    "TeamsSettings",
    # Webhook
    "WebhookSettings",
    "build_relay_config",
    "get_base_settings",
    "get_discord_settings",
    "get_teams_settings",
    "get_webhook_settings",
]
