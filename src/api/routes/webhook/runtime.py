"""Runtime do despacho: inline (antes de responder) ou async (background).

No modo async cada lote vira uma task associada ao correlation_id do
request que o trouxe. O resumo da entrega é logado quando a task termina
e o shutdown informa quais lotes precisaram ser cancelados.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import DispatchSummary, Event
    from app.services.dispatcher import EventDispatcher
    from config.settings import DispatchMode

logger = logging.getLogger(__name__)

MAX_CONCURRENT_BATCHES = 100

_BATCH_SEMAPHORE = asyncio.Semaphore(MAX_CONCURRENT_BATCHES)
# task -> correlation_id do lote
_pending_batches: dict[asyncio.Task[DispatchSummary], str] = {}


async def dispatch_batch(
    *,
    events: Sequence[Event],
    dispatcher: EventDispatcher,
    correlation_id: str,
    mode: DispatchMode = "inline",
) -> None:
    """Despacha o lote conforme o modo configurado."""
    if mode == "async":
        schedule_batch(events=events, dispatcher=dispatcher, correlation_id=correlation_id)
        return

    summary = await dispatcher.dispatch(events, correlation_id=correlation_id)
    _log_summary(summary, correlation_id=correlation_id, mode="inline")


def schedule_batch(
    *,
    events: Sequence[Event],
    dispatcher: EventDispatcher,
    correlation_id: str,
) -> asyncio.Task[DispatchSummary]:
    """Agenda o despacho do lote em background, limitado a MAX_CONCURRENT_BATCHES."""
    task = asyncio.create_task(_dispatch_with_limit(events, dispatcher, correlation_id))
    _pending_batches[task] = correlation_id
    task.add_done_callback(_on_batch_done)
    logger.info(
        "webhook_dispatch_scheduled",
        extra={
            "correlation_id": correlation_id,
            "mode": "async",
            "event_count": len(events),
            "pending_batches": len(_pending_batches),
        },
    )
    return task


async def _dispatch_with_limit(
    events: Sequence[Event],
    dispatcher: EventDispatcher,
    correlation_id: str,
) -> DispatchSummary:
    async with _BATCH_SEMAPHORE:
        return await dispatcher.dispatch(events, correlation_id=correlation_id)


def _on_batch_done(task: asyncio.Task[DispatchSummary]) -> None:
    correlation_id = _pending_batches.pop(task, "")
    if task.cancelled():
        # cancelamentos são reportados pelo drain
        return

    exc = task.exception()
    if exc is not None:
        logger.error(
            "webhook_dispatch_task_failed",
            extra={
                "correlation_id": correlation_id,
                "error_type": type(exc).__name__,
                "pending_batches": len(_pending_batches),
            },
        )
        return

    _log_summary(task.result(), correlation_id=correlation_id, mode="async")


def _log_summary(summary: DispatchSummary, *, correlation_id: str, mode: DispatchMode) -> None:
    logger.info(
        "webhook_dispatch_completed",
        extra={
            "correlation_id": correlation_id,
            "mode": mode,
            **summary.as_dict(),
        },
    )


async def drain_background_tasks(timeout_seconds: float = 30.0) -> None:
    """Aguarda lotes async pendentes no shutdown; cancela os que excederem o prazo."""
    if not _pending_batches:
        return

    logger.info(
        "webhook_dispatch_shutdown_wait",
        extra={
            "pending_batches": len(_pending_batches),
            "timeout_seconds": timeout_seconds,
        },
    )
    _, pending = await asyncio.wait(list(_pending_batches), timeout=timeout_seconds)
    if not pending:
        return

    cancelled_ids = sorted(_pending_batches[task] for task in pending)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    logger.warning(
        "webhook_dispatch_shutdown_cancelled",
        extra={
            "cancelled_batches": len(cancelled_ids),
            "correlation_ids": cancelled_ids,
        },
    )
