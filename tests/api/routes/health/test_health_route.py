"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check
from app.services.dispatcher import EventDispatcher
from config.settings import BaseSettings, RelayConfig, WebhookSettings
from tests.fakes.fake_sinks import RecordingSink


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_service_name() -> None:
    config = RelayConfig(base=BaseSettings(service_name="relay-test"))

    response = await health_check(_build_request_with_state(SimpleNamespace(relay_config=config)))

    assert response.status == "healthy"
    assert response.service == "relay-test"


@pytest.mark.asyncio
async def test_readiness_not_ready_without_secret() -> None:
    state = SimpleNamespace(relay_config=RelayConfig(), dispatcher=EventDispatcher([]))

    response = await readiness_check(_build_request_with_state(state))
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["webhook_secret"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_ready_reports_sink_status() -> None:
    config = RelayConfig(webhook=WebhookSettings(secret="s3cret"))
    dispatcher = EventDispatcher([RecordingSink("teams", enabled=False), RecordingSink("discord")])
    state = SimpleNamespace(relay_config=config, dispatcher=dispatcher)

    response = await readiness_check(_build_request_with_state(state))
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["sinks"]["teams"]["status"] == "disabled"
    assert payload["checks"]["sinks"]["discord"]["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_before_startup() -> None:
    response = await readiness_check(_build_request_with_state(SimpleNamespace()))

    assert response.status_code == 503
