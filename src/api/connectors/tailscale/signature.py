"""Validação de assinatura HMAC-SHA256 do corpo bruto do webhook."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass

SIGNATURE_PREFIX = "sha256="


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da verificação (sem expor digests)."""

    valid: bool
    error: str | None = None


def compute_signature(payload: bytes, secret: str) -> str:
    """Calcula o digest hex HMAC-SHA256 de `payload` com `secret`."""
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def verify_signature(payload: bytes, signature: str | None, secret: str) -> SignatureResult:
    """Compara a assinatura recebida com a calculada em tempo constante.

    Args:
        payload: Corpo bruto da requisição (bytes exatos recebidos)
        signature: Valor do header; hex puro ou prefixado com "sha256="
        secret: Secret compartilhado (não vazio)

    Returns:
        SignatureResult com valid=True apenas se os digests coincidirem
    """
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    received = signature.strip()
    if received.lower().startswith(SIGNATURE_PREFIX):
        received = received[len(SIGNATURE_PREFIX) :]

    computed = compute_signature(payload, secret)
    # compare_digest exige ASCII em str; normaliza para bytes
    if not hmac.compare_digest(computed.encode("ascii"), received.lower().encode("utf-8")):
        return SignatureResult(valid=False, error="signature_mismatch")
    return SignatureResult(valid=True)
