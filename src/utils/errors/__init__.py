"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    SinkDeliveryError,
    SinkError,
    SinkFormatError,
)

__all__ = [
    "SinkDeliveryError",
    "SinkError",
    "SinkFormatError",
]
