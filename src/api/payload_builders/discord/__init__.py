"""Payload builders do Discord."""

from .message import (
    CONTENT_LIMIT,
    TRUNCATED_LENGTH,
    TRUNCATION_MARKER,
    DiscordMessagePayloadBuilder,
    fit_content,
    render_data_lines,
)

__all__ = [
    "CONTENT_LIMIT",
    "TRUNCATED_LENGTH",
    "TRUNCATION_MARKER",
    "DiscordMessagePayloadBuilder",
    "fit_content",
    "render_data_lines",
]
