"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # No bootstrap
    configure_logging(level="INFO", service_name="tailnet-relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("sink_delivered", extra={"sink": "discord"})

Todo log carrega correlation_id e service. Nunca registrar o corpo
bruto do webhook nem o secret.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
