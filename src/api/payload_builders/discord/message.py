"""Builder de mensagem para webhook do Discord.

Referência: https://discord.com/developers/docs/resources/webhook
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import Event

# Limite do Discord para `content`, em caracteres
CONTENT_LIMIT = 2000
TRUNCATED_LENGTH = 1990
TRUNCATION_MARKER = "\n...\n"


def render_data_lines(data: Mapping[str, str]) -> str:
    """Uma linha `key="value"` por entrada (ordem não garantida)."""
    return "".join(f'{key}="{value}"\n' for key, value in data.items())


def fit_content(content: str, fallback: str) -> str:
    """Aplica o limite do Discord ao conteúdo.

    O corte é por code point (len de str), nunca no meio de um caractere.
    Conteúdo vazio cai para `fallback`.
    """
    if len(content) >= CONTENT_LIMIT:
        return content[:TRUNCATED_LENGTH] + TRUNCATION_MARKER
    if not content:
        return fallback
    return content


class DiscordMessagePayloadBuilder:
    """Builder de payload {thread_name, content}."""

    def build(self, event: Event) -> dict[str, Any]:
        return {
            "thread_name": event.message,
            "content": fit_content(render_data_lines(event.data), event.message),
        }
