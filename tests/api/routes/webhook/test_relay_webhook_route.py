"""Testes do endpoint POST /webhook."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.connectors.discord import DiscordSink
from api.connectors.tailscale.signature import compute_signature
from api.connectors.teams import TeamsSink
from api.routes.webhook import router as webhook
from app.services.dispatcher import EventDispatcher
from config.settings import RelayConfig, WebhookSettings
from tests.fakes.fake_sinks import FakeHttpPoster, RecordingSink

SECRET = "s3cret"
BODY = b'[{"message":"node approved","data":{"user":"alice"}}]'


def _config(secret: str = SECRET, mode: str = "inline") -> RelayConfig:
    return RelayConfig(webhook=WebhookSettings(secret=secret, dispatch_mode=mode))


def _build_request(
    *,
    state: SimpleNamespace,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/webhook",
        "raw_path": b"/webhook",
        "query_string": b"",
        "headers": raw_headers,
        "app": SimpleNamespace(state=state),
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _signed_headers(body: bytes, secret: str = SECRET) -> dict[str, str]:
    return {"X-Webhook-Signature": compute_signature(body, secret)}


@pytest.mark.asyncio
async def test_signed_batch_is_relayed_to_both_sinks() -> None:
    http = FakeHttpPoster()
    dispatcher = EventDispatcher(
        [
            TeamsSink("https://teams.test/hook", http_client=http),
            DiscordSink("https://discord.test/hook", http_client=http),
        ]
    )
    state = SimpleNamespace(relay_config=_config(), dispatcher=dispatcher)

    response = await webhook.receive_webhook(
        _build_request(state=state, body=BODY, headers=_signed_headers(BODY))
    )

    assert response.status_code == 200
    assert response.body == b""
    calls = {call["url"]: call["json"] for call in http.calls}
    assert calls["https://discord.test/hook?wait=true"]["content"] == 'user="alice"\n'
    teams_card = calls["https://teams.test/hook"]["attachments"][0]["content"]
    assert teams_card["body"][1]["facts"] == [{"title": "user", "value": "alice"}]


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"X-Webhook-Signature": "sha256=deadbeef"},
        {"X-Webhook-Signature": compute_signature(BODY, "wrong")},
    ],
)
@pytest.mark.asyncio
async def test_bad_signature_returns_400_and_contacts_no_sink(headers: dict[str, str]) -> None:
    sink = RecordingSink("discord")
    state = SimpleNamespace(relay_config=_config(), dispatcher=EventDispatcher([sink]))

    response = await webhook.receive_webhook(_build_request(state=state, body=BODY, headers=headers))

    assert response.status_code == 400
    assert response.body == b"Bad Request"
    assert sink.formatted == []
    assert sink.delivered == []


@pytest.mark.asyncio
async def test_malformed_payload_returns_400() -> None:
    body = b"{invalid}"
    sink = RecordingSink("discord")
    state = SimpleNamespace(relay_config=_config(), dispatcher=EventDispatcher([sink]))

    response = await webhook.receive_webhook(
        _build_request(state=state, body=body, headers=_signed_headers(body))
    )

    assert response.status_code == 400
    assert sink.delivered == []


@pytest.mark.asyncio
async def test_missing_server_secret_returns_400(caplog: pytest.LogCaptureFixture) -> None:
    sink = RecordingSink("discord")
    state = SimpleNamespace(relay_config=_config(secret=""), dispatcher=EventDispatcher([sink]))

    with caplog.at_level("ERROR"):
        response = await webhook.receive_webhook(
            _build_request(state=state, body=BODY, headers=_signed_headers(BODY, ""))
        )

    assert response.status_code == 400
    assert sink.delivered == []
    assert "webhook_secret_missing" in caplog.text


@pytest.mark.asyncio
async def test_sink_failure_still_acknowledges() -> None:
    failing = RecordingSink("teams", fail_deliver=True)
    ok = RecordingSink("discord")
    state = SimpleNamespace(relay_config=_config(), dispatcher=EventDispatcher([failing, ok]))

    response = await webhook.receive_webhook(
        _build_request(state=state, body=BODY, headers=_signed_headers(BODY))
    )

    assert response.status_code == 200
    assert len(ok.delivered) == 1


@pytest.mark.asyncio
async def test_custom_signature_header() -> None:
    config = RelayConfig(
        webhook=WebhookSettings(secret=SECRET, signature_header="Tailscale-Webhook-Signature")
    )
    sink = RecordingSink("discord")
    state = SimpleNamespace(relay_config=config, dispatcher=EventDispatcher([sink]))

    response = await webhook.receive_webhook(
        _build_request(
            state=state,
            body=BODY,
            headers={"Tailscale-Webhook-Signature": compute_signature(BODY, SECRET)},
        )
    )

    assert response.status_code == 200
    assert len(sink.delivered) == 1


@pytest.mark.asyncio
async def test_async_mode_schedules_dispatch(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    async def _fake_dispatch_batch(*, events, dispatcher, correlation_id, mode) -> None:
        captured["events"] = [event.message for event in events]
        captured["correlation_id"] = correlation_id
        captured["mode"] = mode

    monkeypatch.setattr(webhook, "dispatch_batch", _fake_dispatch_batch)
    state = SimpleNamespace(relay_config=_config(mode="async"), dispatcher=EventDispatcher([]))
    headers = {**_signed_headers(BODY), "x-correlation-id": "cid-123"}

    response = await webhook.receive_webhook(_build_request(state=state, body=BODY, headers=headers))

    assert response.status_code == 200
    assert captured == {
        "events": ["node approved"],
        "correlation_id": "cid-123",
        "mode": "async",
    }


def test_batch_body_is_signed_over_exact_bytes() -> None:
    reencoded = json.dumps(json.loads(BODY)).encode("utf-8")

    assert reencoded != BODY
    assert compute_signature(reencoded, SECRET) != compute_signature(BODY, SECRET)
