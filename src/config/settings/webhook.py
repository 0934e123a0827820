"""Settings do webhook de entrada (eventos do tailnet).

Secret compartilhado e modo de processamento do lote.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.settings.base import read_number_env

DispatchMode = Literal["inline", "async"]

DEFAULT_SIGNATURE_HEADER = "X-Webhook-Signature"


@dataclass(frozen=True)
class WebhookSettings:
    """Configurações do endpoint de entrada.

    Attributes:
        secret: Secret compartilhado para validação HMAC do corpo bruto
        signature_header: Nome do header que carrega a assinatura
        dispatch_mode: inline (entrega antes de responder) ou async (background)
        drain_timeout_seconds: Espera máxima por entregas pendentes no shutdown
        parse_errors: Variáveis de ambiente com valor não numérico
    """

    secret: str = ""
    signature_header: str = DEFAULT_SIGNATURE_HEADER
    dispatch_mode: DispatchMode = "inline"
    drain_timeout_seconds: float = 30.0
    parse_errors: tuple[str, ...] = ()

    def validate(self) -> list[str]:
        """Valida configurações do webhook.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = list(self.parse_errors)

        if not self.secret:
            errors.append("TS_WEBHOOK_SECRET não configurado")

        if not self.signature_header:
            errors.append("WEBHOOK_SIGNATURE_HEADER não pode ser vazio")

        if self.dispatch_mode not in ("inline", "async"):
            errors.append("WEBHOOK_DISPATCH_MODE deve ser 'inline' ou 'async'")

        if not self.drain_timeout_seconds >= 0:
            errors.append("WEBHOOK_DRAIN_TIMEOUT_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> WebhookSettings:
    """Carrega WebhookSettings a partir de variáveis de ambiente."""
    parse_errors: list[str] = []
    drain_timeout = read_number_env("WEBHOOK_DRAIN_TIMEOUT_SECONDS", 30.0, parse_errors)
    return WebhookSettings(
        secret=os.getenv("TS_WEBHOOK_SECRET", ""),
        signature_header=os.getenv("WEBHOOK_SIGNATURE_HEADER", DEFAULT_SIGNATURE_HEADER),
        dispatch_mode=os.getenv("WEBHOOK_DISPATCH_MODE", "inline").lower(),  # type: ignore[arg-type]
        drain_timeout_seconds=drain_timeout,
        parse_errors=tuple(parse_errors),
    )


@lru_cache(maxsize=1)
def get_webhook_settings() -> WebhookSettings:
    """Retorna instância cacheada de WebhookSettings."""
    return _load_from_env()
