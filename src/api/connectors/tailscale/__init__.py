"""Conector de entrada: webhooks de eventos do tailnet.

Único ponto que toca o corpo bruto do request: assinatura HMAC e
decodificação do lote em eventos canônicos.
"""

from .signature import SignatureResult, compute_signature, verify_signature
from .webhook import (
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
