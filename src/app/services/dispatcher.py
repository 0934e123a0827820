"""Fan-out de eventos para os sinks com isolamento de falhas.

Para cada evento (na ordem do lote), todos os sinks habilitados são
tentados concorrentemente: `format` e depois `deliver`. Falha de um
par (evento, sink) é registrada e não interrompe irmãos nem os
eventos seguintes. Não há retry.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from app.observability import get_correlation_id, record_batch, record_delivery, record_latency
from app.protocols.models import DispatchSummary
from utils.errors import SinkDeliveryError, SinkError, SinkFormatError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import Event
    from app.protocols.sink import SinkAdapterProtocol

logger = logging.getLogger(__name__)


async def dispatch(
    events: Sequence[Event],
    sinks: Sequence[SinkAdapterProtocol],
    *,
    correlation_id: str | None = None,
) -> DispatchSummary:
    """Entrega cada evento a cada sink habilitado.

    Args:
        events: Eventos já autenticados, na ordem do payload
        sinks: Adapters configurados (desabilitados são pulados)
        correlation_id: ID de rastreio; usa o do contexto se None

    Returns:
        DispatchSummary apenas para logs; nunca levanta por falha de sink.
    """
    cid = correlation_id or get_correlation_id()
    enabled = [sink for sink in sinks if sink.enabled]
    summary = DispatchSummary(event_count=len(events))
    summary.skipped = (len(sinks) - len(enabled)) * len(events)

    for index, event in enumerate(events):
        results = await asyncio.gather(
            *(_attempt(sink, event, index=index, correlation_id=cid) for sink in enabled)
        )
        for delivered in results:
            if delivered:
                summary.delivered += 1
            else:
                summary.failed += 1

    record_batch(
        event_count=summary.event_count,
        delivered=summary.delivered,
        failed=summary.failed,
        skipped=summary.skipped,
        correlation_id=cid,
    )
    return summary


async def _attempt(
    sink: SinkAdapterProtocol,
    event: Event,
    *,
    index: int,
    correlation_id: str,
) -> bool:
    """Executa format + deliver de um par (evento, sink); True se entregue."""
    try:
        payload = sink.format(event)
    except Exception as exc:
        _log_failure(SinkFormatError(sink.name, type(exc).__name__), event, index, correlation_id)
        return False

    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(sink.deliver(payload), timeout=sink.timeout_seconds)
    except TimeoutError:
        error: SinkError = SinkDeliveryError(sink.name, "deadline_exceeded")
    except SinkError as exc:
        error = exc
    except Exception as exc:
        logger.exception(
            "sink_unexpected_error",
            extra={"sink": sink.name, "event_index": index, "correlation_id": correlation_id},
        )
        error = SinkDeliveryError(sink.name, type(exc).__name__)
    else:
        latency_ms = (time.perf_counter() - started_at) * 1000
        record_latency(sink.name, "deliver", latency_ms, correlation_id)
        record_delivery(sink.name, "delivered", correlation_id)
        return True

    _log_failure(error, event, index, correlation_id)
    return False


def _log_failure(error: SinkError, event: Event, index: int, correlation_id: str) -> None:
    message = "sink_format_failed" if isinstance(error, SinkFormatError) else "sink_deliver_failed"
    logger.warning(
        message,
        extra={
            "sink": error.sink,
            "reason": error.reason,
            "status_code": getattr(error, "status_code", None),
            "event_index": index,
            "event_type": event.type,
            "correlation_id": correlation_id,
        },
    )
    record_delivery(error.sink, "failed", correlation_id, error_type=type(error).__name__)


class EventDispatcher:
    """Dispatcher ligado a um conjunto fixo de sinks (montado no startup)."""

    def __init__(self, sinks: Sequence[SinkAdapterProtocol]) -> None:
        self._sinks = tuple(sinks)

    @property
    def sinks(self) -> tuple[SinkAdapterProtocol, ...]:
        return self._sinks

    @property
    def enabled_sinks(self) -> list[str]:
        return [sink.name for sink in self._sinks if sink.enabled]

    async def dispatch(
        self,
        events: Sequence[Event],
        correlation_id: str | None = None,
    ) -> DispatchSummary:
        return await dispatch(events, self._sinks, correlation_id=correlation_id)
