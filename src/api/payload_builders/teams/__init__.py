"""Payload builders do Microsoft Teams."""

from .card import TeamsCardPayloadBuilder, build_adaptive_card, build_facts

__all__ = ["TeamsCardPayloadBuilder", "build_adaptive_card", "build_facts"]
