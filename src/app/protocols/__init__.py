"""Protocolos e contratos do core da aplicação."""

from .http_client import HttpPosterProtocol
from .models import EVENT_LIST_ADAPTER, DispatchSummary, Event
from .sink import SinkAdapterProtocol

__all__ = [
    "EVENT_LIST_ADAPTER",
    "DispatchSummary",
    "Event",
    "HttpPosterProtocol",
    "SinkAdapterProtocol",
]
