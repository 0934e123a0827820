"""Webhook do tailnet: assinatura e parsing seguro do lote."""

from ..signature import SignatureResult, compute_signature, verify_signature
from .receive import (
    InvalidSignatureError,
    MalformedPayloadError,
    MissingSecretError,
    WebhookRequestError,
    verify,
)

__all__ = [
    "InvalidSignatureError",
    "MalformedPayloadError",
    "MissingSecretError",
    "SignatureResult",
    "WebhookRequestError",
    "compute_signature",
    "verify",
    "verify_signature",
]
