"""Endpoint de recebimento de eventos do tailnet.

Endpoint:
- POST /webhook: lote de eventos assinado com HMAC-SHA256

Respostas:
- 200 (corpo vazio) quando assinatura e parse são válidos, independente
  do resultado das entregas nos sinks
- 400 (texto) para assinatura inválida, payload malformado ou secret
  ausente no servidor; nenhum sink é contatado
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from api.connectors.tailscale.webhook import (
    MissingSecretError,
    WebhookRequestError,
    verify,
)
from api.routes.webhook.runtime import dispatch_batch
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from app.services.dispatcher import EventDispatcher
    from config.settings import RelayConfig

logger = logging.getLogger(__name__)

router = APIRouter()


def _bad_request() -> Response:
    return Response(
        content="Bad Request",
        media_type="text/plain",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.post("/webhook", response_model=None)
async def receive_webhook(request: Request) -> Response:
    """Autentica, decodifica e despacha o lote para os sinks.

    Returns:
        Response vazia (200) ou texto de erro (400).
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        config: RelayConfig = request.app.state.relay_config
        dispatcher: EventDispatcher = request.app.state.dispatcher

        raw_body = await request.body()
        signature = request.headers.get(config.webhook.signature_header)

        try:
            events = verify(raw_body, signature, config.webhook.secret)
        except MissingSecretError:
            logger.error(
                "webhook_secret_missing",
                extra={"correlation_id": get_correlation_id()},
            )
            return _bad_request()
        except WebhookRequestError as exc:
            logger.warning(
                "webhook_rejected",
                extra={
                    "correlation_id": get_correlation_id(),
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return _bad_request()

        logger.info(
            "webhook_received",
            extra={
                "correlation_id": get_correlation_id(),
                "event_count": len(events),
                "payload_size": len(raw_body),
            },
        )

        await dispatch_batch(
            events=events,
            dispatcher=dispatcher,
            correlation_id=get_correlation_id(),
            mode=config.webhook.dispatch_mode,
        )
        return Response(status_code=status.HTTP_200_OK)

    finally:
        reset_correlation_id(token)
