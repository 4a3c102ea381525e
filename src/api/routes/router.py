"""Agregador de rotas — registra todos os routers do gateway.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.checkout.router import router as checkout_router
from api.routes.custom_order.router import router as custom_order_router
from api.routes.health.router import router as health_router
from api.routes.webhook.router import router as webhook_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(checkout_router, tags=["checkout"])
    api_router.include_router(webhook_router, tags=["webhook"])
    api_router.include_router(custom_order_router, tags=["custom-order"])

    return api_router
