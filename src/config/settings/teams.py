"""Settings específicas de Microsoft Teams.

Webhook de entrada (Incoming Webhook) de um canal do Teams.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import read_number_env


@dataclass(frozen=True)
class TeamsSettings:
    """Configurações do sink Teams.

    Attributes:
        webhook_url: URL do Incoming Webhook (vazio = sink desabilitado)
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
        """Valida configurações do Teams."""
        errors: list[str] = list(self.parse_errors)
        if not self.request_timeout_seconds > 0:
            errors.append("TEAMS_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> TeamsSettings:
    """Carrega TeamsSettings de variáveis de ambiente."""
    parse_errors: list[str] = []
    timeout = read_number_env("TEAMS_REQUEST_TIMEOUT_SECONDS", 10.0, parse_errors)
    return TeamsSettings(
        webhook_url=os.getenv("TEAMS_WEBHOOK_URL", "").strip(),
        request_timeout_seconds=timeout,
        parse_errors=tuple(parse_errors),
    )


@lru_cache(maxsize=1)
def get_teams_settings() -> TeamsSettings:
    """Retorna instância cacheada de TeamsSettings."""
    return _load_from_env()
