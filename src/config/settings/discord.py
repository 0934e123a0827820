"""Settings específicas de Discord.

Webhook de canal do Discord (execute webhook).
Referência: https://discord.com/developers/docs/resources/webhook
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import read_number_env


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do sink Discord.

    Attributes:
        webhook_url: URL do webhook (vazio = sink desabilitado)
        request_timeout_seconds: Timeout da requisição HTTP
        parse_errors: Variáveis de ambiente com valor não numérico
    """

    webhook_url: str = ""
    request_timeout_seconds: float = 10.0
    parse_errors: tuple[str, ...] = ()

    @property
    def enabled(self) -> bool:
        """Sink ativo apenas com URL configurada."""
        return bool(self.webhook_url)

    def validate(self) -> list[str]:
        """Valida configurações de Discord."""
        errors: list[str] = list(self.parse_errors)
        if not self.request_timeout_seconds > 0:
            errors.append("DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings de variáveis de ambiente."""
    parse_errors: list[str] = []
    timeout = read_number_env("DISCORD_REQUEST_TIMEOUT_SECONDS", 10.0, parse_errors)
    return DiscordSettings(
        webhook_url=os.getenv("DISCORD_WEBHOOK_URL", "").strip(),
        request_timeout_seconds=timeout,
        parse_errors=tuple(parse_errors),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()
