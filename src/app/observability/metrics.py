"""Métricas do relay registradas como logs estruturados.

Agregáveis depois pelo backend de logs (Cloud Logging, Loki etc.).

Métricas:
- Latência: tempo de entrega por sink
- Entrega: resultado por (evento, sink)
- Lote: tamanho e resultado consolidado de cada webhook recebido
"""

from __future__ import annotations

import logging
from typing import Literal

logger = logging.getLogger(__name__)

DeliveryOutcome = Literal["delivered", "failed", "skipped"]


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "teams", "discord")
        operation: Nome da operação (ex: "deliver")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_delivery(
    sink: str,
    outcome: DeliveryOutcome,
    correlation_id: str | None = None,
    error_type: str | None = None,
) -> None:
    """Registra resultado de uma entrega (evento, sink)."""
    extra: dict[str, object] = {
        "metric_type": "delivery",
        "sink": sink,
        "outcome": outcome,
        "correlation_id": correlation_id,
    }
    if error_type:
        extra["error_type"] = error_type
    logger.info("metric_delivery", extra=extra)


def record_batch(
    event_count: int,
    delivered: int,
    failed: int,
    skipped: int,
    correlation_id: str | None = None,
) -> None:
    """Registra resumo do lote despachado."""
    logger.info(
        "metric_batch",
        extra={
            "metric_type": "batch",
            "event_count": event_count,
            "delivered": delivered,
            "failed": failed,
            "skipped": skipped,
            "correlation_id": correlation_id,
        },
    )
