"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, monta a RelayConfig imutável e
conecta os sinks concretos ao dispatcher.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    config = initialize_app()
    validate_runtime_settings(config)
"""

from __future__ import annotations

import logging

from app.bootstrap.sinks import create_dispatcher, create_sinks
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import RelayConfig, build_relay_config

logger = logging.getLogger(__name__)


def initialize_app(config: RelayConfig | None = None) -> RelayConfig:
    """Carrega a configuração e configura logging JSON.

    Deve ser chamada uma vez no início do processo.

    Returns:
        RelayConfig usada pelo restante do processo.
    """
    relay_config = config or build_relay_config()
    configure_logging(
        level=relay_config.base.log_level,
        service_name=relay_config.base.service_name,
        correlation_id_getter=get_correlation_id,
    )
    return relay_config


def validate_runtime_settings(config: RelayConfig) -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    environment = config.base.environment
    errors = config.validate()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if config.base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


__all__ = [
    "create_dispatcher",
    "create_sinks",
    "initialize_app",
    "validate_runtime_settings",
]
