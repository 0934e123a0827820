"""Rotas HTTP da API: adapters de entrada.

- webhook/: POST /webhook (lote assinado de eventos do tailnet)
- health/: liveness e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
