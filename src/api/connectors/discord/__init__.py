"""Conector Discord: sink de saída via webhook de canal."""

from .sink import SINK_NAME, DiscordSink, build_execute_url, create_discord_sink

__all__ = ["SINK_NAME", "DiscordSink", "build_execute_url", "create_discord_sink"]
