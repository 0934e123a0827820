"""Builder de MessageCard com Adaptive Card para Incoming Webhook do Teams.

Referência:
https://learn.microsoft.com/en-us/outlook/actionable-messages/message-card-reference
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import Event

MESSAGE_CARD_TYPE = "MessageCard"
MESSAGE_CARD_CONTEXT = "https://schema.org/extensions"
ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.2"
THEME_COLOR = "0078D7"  # Microsoft blue


def build_facts(data: Mapping[str, str]) -> list[dict[str, str]]:
    """Converte `data` em fatos {title, value} (ordem não garantida)."""
    return [{"title": key, "value": value} for key, value in data.items()]


def build_adaptive_card(event: Event) -> dict[str, Any]:
    """Monta o corpo do card: título em TextBlock e `data` em FactSet."""
    return {
        "type": "AdaptiveCard",
        "body": [
            {
                "type": "TextBlock",
                "size": "Medium",
                "weight": "Bolder",
                "text": event.message,
            },
            {
                "type": "FactSet",
                "facts": build_facts(event.data),
            },
        ],
        "$schema": ADAPTIVE_CARD_SCHEMA,
        "version": ADAPTIVE_CARD_VERSION,
    }


class TeamsCardPayloadBuilder:
    """Builder do envelope MessageCard.

    O correlationId é novo a cada chamada e serve só para rastreio
    entre sistemas; não identifica reenvios.
    """

    def build(self, event: Event) -> dict[str, Any]:
        return {
            "@type": MESSAGE_CARD_TYPE,
            "@context": MESSAGE_CARD_CONTEXT,
            "correlationId": str(uuid.uuid4()),
            "text": "",
            "summary": event.message,
            "themeColor": THEME_COLOR,
            "title": event.message,
            "attachments": [
                {
                    "contentType": ADAPTIVE_CARD_CONTENT_TYPE,
                    "content": build_adaptive_card(event),
                }
            ],
        }
