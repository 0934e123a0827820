"""Conector Teams: sink de saída via Incoming Webhook."""

from .sink import SINK_NAME, TeamsSink, create_teams_sink

__all__ = ["SINK_NAME", "TeamsSink", "create_teams_sink"]
