"""Entrypoint do checkout-gateway.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import asyncio
import contextlib
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import SERVICE_NAME, build_dependencies, initialize_app, validate_runtime_settings
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bootstrap import GatewayDependencies

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Monta dependências (se não injetadas) e inicia o sweeper de rate limit

    Shutdown:
    - Cancela o sweeper e fecha o store
    """
    logger.info("app_starting", extra={"service": SERVICE_NAME})
    if app.state.dependencies is None:
        validate_runtime_settings()
        app.state.dependencies = build_dependencies()

    dependencies: GatewayDependencies = app.state.dependencies
    sweeper = asyncio.create_task(
        dependencies.rate_limiter.run_sweeper(dependencies.sweep_interval_seconds),
        name="rate_limit_sweeper",
    )

    yield

    logger.info("app_shutting_down", extra={"service": SERVICE_NAME})
    sweeper.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await sweeper

    close = getattr(dependencies.rate_limiter.store, "close", None)
    if callable(close):
        await close()


def create_app(dependencies: GatewayDependencies | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        dependencies: Dependências prontas (testes); None monta a partir do env

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="checkout-gateway",
        description="Camada de entrada entre a vitrine e o provedor de pagamento",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.dependencies = dependencies

    # CORS é aplicado por rota (gate de origem + headers em toda resposta)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": SERVICE_NAME})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting checkout-gateway in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
