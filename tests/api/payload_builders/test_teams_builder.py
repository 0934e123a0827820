"""Testes do builder de MessageCard do Teams."""

from __future__ import annotations

import uuid

from api.payload_builders.teams import TeamsCardPayloadBuilder, build_facts
from app.protocols.models import Event


def test_build_envelope_fields() -> None:
    event = Event(message="node approved", data={"user": "alice"})

    payload = TeamsCardPayloadBuilder().build(event)

    assert payload["@type"] == "MessageCard"
    assert payload["@context"] == "https://schema.org/extensions"
    assert payload["summary"] == "node approved"
    assert payload["title"] == "node approved"
    assert payload["themeColor"] == "0078D7"
    uuid.UUID(payload["correlationId"])


def test_build_adaptive_card_body() -> None:
    event = Event(message="node approved", data={"user": "alice"})

    payload = TeamsCardPayloadBuilder().build(event)
    (attachment,) = payload["attachments"]
    card = attachment["content"]
    text_block, fact_set = card["body"]

    assert attachment["contentType"] == "application/vnd.microsoft.card.adaptive"
    assert card["type"] == "AdaptiveCard"
    assert card["version"] == "1.2"
    assert text_block["type"] == "TextBlock"
    assert text_block["text"] == "node approved"
    assert fact_set["type"] == "FactSet"
    assert fact_set["facts"] == [{"title": "user", "value": "alice"}]


def test_correlation_id_is_fresh_per_build() -> None:
    builder = TeamsCardPayloadBuilder()
    event = Event(message="x")

    assert builder.build(event)["correlationId"] != builder.build(event)["correlationId"]


def test_empty_data_gives_empty_fact_set() -> None:
    payload = TeamsCardPayloadBuilder().build(Event(message="x"))

    assert payload["attachments"][0]["content"]["body"][1]["facts"] == []


def test_build_facts_covers_every_entry_regardless_of_order() -> None:
    facts = build_facts({"user": "alice", "node": "n1", "os": "linux"})

    assert sorted(facts, key=lambda fact: fact["title"]) == [
        {"title": "node", "value": "n1"},
        {"title": "os", "value": "linux"},
        {"title": "user", "value": "alice"},
    ]
