"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class ConfigCheck:
    """Resultado de checagem de configuração."""

    status: Literal["ok", "disabled", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe: verifica se o processo está respondendo."""
    config = getattr(request.app.state, "relay_config", None)
    service = config.base.service_name if config is not None else "tailnet-relay"
    return HealthResponse(
        status="healthy",
        service=service,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: exige secret configurado; sinks apenas informativos."""
    config = getattr(request.app.state, "relay_config", None)
    dispatcher = getattr(request.app.state, "dispatcher", None)

    secret_check = _check_secret(config)
    sink_checks = {sink.name: _check_sink(sink) for sink in getattr(dispatcher, "sinks", ())}
    ready = secret_check.status == "ok" and dispatcher is not None

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "webhook_secret": secret_check.as_dict(),
            "sinks": {name: check.as_dict() for name, check in sink_checks.items()},
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_secret(config: Any | None) -> ConfigCheck:
    if config is None:
        return ConfigCheck(status="failed", error="not_initialized")
    if not config.webhook.secret:
        return ConfigCheck(status="failed", error="not_configured")
    return ConfigCheck(status="ok")


def _check_sink(sink: Any) -> ConfigCheck:
    if not sink.enabled:
        return ConfigCheck(status="disabled", error="not_configured")
    return ConfigCheck(status="ok")
