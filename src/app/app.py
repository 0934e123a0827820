"""Entrypoint do relay de webhooks do tailnet.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    python -m app.app   # porta de PORT, padrão 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.webhook.runtime import drain_background_tasks
from app.bootstrap import create_dispatcher, initialize_app, validate_runtime_settings
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from config.settings import RelayConfig

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha rápido em staging/production)
    - Monta o dispatcher com os sinks configurados

    Shutdown:
    - Aguarda despachos async pendentes
    """
    relay_config: RelayConfig = app.state.relay_config
    logger.info("app_starting", extra={"service": relay_config.base.service_name})
    validate_runtime_settings(relay_config)
    app.state.dispatcher = create_dispatcher(relay_config)

    yield

    logger.info("app_shutting_down", extra={"service": relay_config.base.service_name})
    await drain_background_tasks(timeout_seconds=relay_config.webhook.drain_timeout_seconds)


def create_app(config: RelayConfig | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        config: RelayConfig explícita; se None, carregada do ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """
    relay_config = initialize_app(config)

    fastapi_app = FastAPI(
        title="tailnet-relay",
        description="Relay de eventos do tailnet para Teams e Discord",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    # Snapshot imutável, lido pelos handlers via request.app.state
    fastapi_app.state.relay_config = relay_config
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": relay_config.base.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint de processo: sobe o uvicorn na porta configurada."""
    import uvicorn

    port = app.state.relay_config.base.port
    logger.info("listening", extra={"port": port})
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
