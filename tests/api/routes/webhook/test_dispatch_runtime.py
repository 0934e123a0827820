"""Testes do runtime de despacho (inline/async) e dos lotes em background."""

from __future__ import annotations

import asyncio

import pytest

from api.routes.webhook import runtime
from app.protocols.models import DispatchSummary, Event
from app.services.dispatcher import EventDispatcher
from tests.fakes.fake_sinks import RecordingSink


class _StubDispatcher:
    """Dispatcher que falha ou demora, para exercitar o ciclo das tasks."""

    def __init__(self, *, error: Exception | None = None, delay: float = 0.0) -> None:
        self._error = error
        self._delay = delay

    async def dispatch(self, events, *, correlation_id=None) -> DispatchSummary:
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return DispatchSummary(event_count=len(events))


async def _wait_until_batches_done(timeout: float = 1.0) -> None:
    start = asyncio.get_running_loop().time()
    while runtime._pending_batches:
        if asyncio.get_running_loop().time() - start > timeout:
            break
        await asyncio.sleep(0.01)


async def _cancel_pending_batches() -> None:
    tasks = list(runtime._pending_batches)
    for task in tasks:
        task.cancel()
    if tasks:
        await asyncio.gather(*tasks, return_exceptions=True)
    runtime._pending_batches.clear()


@pytest.fixture(autouse=True)
async def _cleanup_pending_batches() -> None:
    await _cancel_pending_batches()
    yield
    await _cancel_pending_batches()


def _records(caplog: pytest.LogCaptureFixture, message: str) -> list:
    return [record for record in caplog.records if record.getMessage() == message]


@pytest.mark.asyncio
async def test_inline_dispatch_delivers_before_returning(caplog: pytest.LogCaptureFixture) -> None:
    sink = RecordingSink("discord")

    with caplog.at_level("INFO"):
        await runtime.dispatch_batch(
            events=[Event(message="a")],
            dispatcher=EventDispatcher([sink]),
            correlation_id="cid-inline",
            mode="inline",
        )

    assert len(sink.delivered) == 1
    assert runtime._pending_batches == {}
    (record,) = _records(caplog, "webhook_dispatch_completed")
    assert record.mode == "inline"
    assert record.correlation_id == "cid-inline"
    assert record.delivered == 1


@pytest.mark.asyncio
async def test_async_dispatch_logs_summary_with_batch_correlation_id(
    caplog: pytest.LogCaptureFixture,
) -> None:
    teams = RecordingSink("teams", fail_deliver=True)
    discord = RecordingSink("discord")

    with caplog.at_level("INFO"):
        await runtime.dispatch_batch(
            events=[Event(message="a"), Event(message="b")],
            dispatcher=EventDispatcher([teams, discord]),
            correlation_id="cid-async",
            mode="async",
        )
        await _wait_until_batches_done()

    assert len(discord.delivered) == 2
    (scheduled,) = _records(caplog, "webhook_dispatch_scheduled")
    assert scheduled.event_count == 2
    (completed,) = _records(caplog, "webhook_dispatch_completed")
    assert completed.mode == "async"
    assert completed.correlation_id == "cid-async"
    assert completed.event_count == 2
    assert completed.delivered == 2
    assert completed.failed == 2


@pytest.mark.asyncio
async def test_failed_batch_logs_its_correlation_id(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("ERROR"):
        runtime.schedule_batch(
            events=[Event(message="a")],
            dispatcher=_StubDispatcher(error=RuntimeError("boom")),
            correlation_id="cid-boom",
        )
        await _wait_until_batches_done()

    (record,) = _records(caplog, "webhook_dispatch_task_failed")
    assert record.correlation_id == "cid-boom"
    assert record.error_type == "RuntimeError"
    assert runtime._pending_batches == {}


@pytest.mark.asyncio
async def test_drain_returns_immediately_when_empty() -> None:
    await runtime.drain_background_tasks(timeout_seconds=0.01)
    assert runtime._pending_batches == {}


@pytest.mark.asyncio
async def test_drain_waits_for_batches_that_finish_in_time(caplog: pytest.LogCaptureFixture) -> None:
    runtime.schedule_batch(
        events=[Event(message="a")],
        dispatcher=_StubDispatcher(delay=0.01),
        correlation_id="cid-quick",
    )

    with caplog.at_level("INFO"):
        await runtime.drain_background_tasks(timeout_seconds=1.0)
        await _wait_until_batches_done()

    assert _records(caplog, "webhook_dispatch_shutdown_cancelled") == []
    (completed,) = _records(caplog, "webhook_dispatch_completed")
    assert completed.correlation_id == "cid-quick"


@pytest.mark.asyncio
async def test_drain_cancels_batches_past_timeout(caplog: pytest.LogCaptureFixture) -> None:
    for correlation_id in ("cid-b", "cid-a"):
        runtime.schedule_batch(
            events=[Event(message="a")],
            dispatcher=_StubDispatcher(delay=10),
            correlation_id=correlation_id,
        )

    with caplog.at_level("WARNING"):
        await runtime.drain_background_tasks(timeout_seconds=0.01)
        await _wait_until_batches_done()

    (record,) = _records(caplog, "webhook_dispatch_shutdown_cancelled")
    assert record.cancelled_batches == 2
    assert record.correlation_ids == ["cid-a", "cid-b"]
    assert runtime._pending_batches == {}
