"""Configuração imutável do relay, montada uma única vez no startup.

Handlers e sinks recebem esta estrutura por referência; nenhum
código de request lê variáveis de ambiente diretamente.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from config.settings.base import BaseSettings, get_base_settings
from config.settings.discord import DiscordSettings, get_discord_settings
from config.settings.teams import TeamsSettings, get_teams_settings
from config.settings.webhook import WebhookSettings, get_webhook_settings


@dataclass(frozen=True)
class RelayConfig:
    """Snapshot somente-leitura de todas as settings do processo."""

    base: BaseSettings = field(default_factory=BaseSettings)
    webhook: WebhookSettings = field(default_factory=WebhookSettings)
    teams: TeamsSettings = field(default_factory=TeamsSettings)
    discord: DiscordSettings = field(default_factory=DiscordSettings)

    def validate(self) -> list[str]:
        """Agrega erros de validação com prefixo por domínio."""
        errors: list[str] = []
        errors.extend(f"base: {error}" for error in self.base.validate())
        errors.extend(f"webhook: {error}" for error in self.webhook.validate())
        errors.extend(f"teams: {error}" for error in self.teams.validate())
        errors.extend(f"discord: {error}" for error in self.discord.validate())
        return errors


def build_relay_config() -> RelayConfig:
    """Monta RelayConfig a partir das settings carregadas do ambiente."""
    return RelayConfig(
        base=get_base_settings(),
        webhook=get_webhook_settings(),
        teams=get_teams_settings(),
        discord=get_discord_settings(),
    )
