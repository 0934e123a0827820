"""Autenticação e parse do lote de eventos (sem PII nos erros)."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from app.protocols.models import EVENT_LIST_ADAPTER, Event

from ..signature import verify_signature

BATCH_WRAPPER_KEY = "events"


class WebhookRequestError(ValueError):
    """Erro base para falhas terminais do request de webhook."""


class MissingSecretError(WebhookRequestError):
    """Secret não configurado no servidor (erro de configuração)."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura ausente ou divergente."""


class MalformedPayloadError(WebhookRequestError):
    """Corpo autenticado não decodifica como lote de eventos."""


def verify(
    raw_body: bytes,
    signature_header_value: str | None,
    shared_secret: str | None,
) -> list[Event]:
    """Autentica o corpo bruto e decodifica a lista ordenada de eventos.

    Args:
        raw_body: Corpo bruto do request
        signature_header_value: Valor do header de assinatura (ou None)
        shared_secret: Secret configurado no servidor

    Raises:
        MissingSecretError: Se não houver secret configurado
        InvalidSignatureError: Se a assinatura for ausente ou inválida
        MalformedPayloadError: Se o JSON for inválido ou fora do formato de lote

    Returns:
        Eventos na ordem em que aparecem no payload
    """
    if not shared_secret:
        raise MissingSecretError("missing_secret")

    result = verify_signature(raw_body, signature_header_value, shared_secret)
    if not result.valid:
        raise InvalidSignatureError(result.error or "invalid_signature")

    try:
        decoded = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise MalformedPayloadError("invalid_json") from exc

    items = _unwrap_batch(decoded)
    try:
        return EVENT_LIST_ADAPTER.validate_python(items)
    except ValidationError as exc:
        raise MalformedPayloadError("invalid_event") from exc


def _unwrap_batch(decoded: Any) -> Any:
    if isinstance(decoded, list):
        return decoded
    if isinstance(decoded, dict) and isinstance(decoded.get(BATCH_WRAPPER_KEY), list):
        return decoded[BATCH_WRAPPER_KEY]
    raise MalformedPayloadError("payload_not_batch")
