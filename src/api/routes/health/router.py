"""Endpoints de health check."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

if TYPE_CHECKING:
    from app.bootstrap.dependencies import GatewayDependencies

logger = logging.getLogger(__name__)

router = APIRouter()

STORE_PING_TIMEOUT_SECONDS = 2.0


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="ok",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: store de rate limit e provedor de pagamento."""
    dependencies: GatewayDependencies | None = getattr(request.app.state, "dependencies", None)
    if dependencies is None:
        store_check = DependencyCheck(status="failed", error="not_configured")
        provider_check = DependencyCheck(status="failed", error="not_configured")
    else:
        store_check = await _check_rate_limit_store(dependencies.rate_limiter.store)
        provider_check = _check_payment_provider(dependencies)

    ready = store_check.status == "ok" and provider_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "rate_limit_store": store_check.as_dict(),
            "payment_provider": provider_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_rate_limit_store(store: Any) -> DependencyCheck:
    ping = getattr(store, "ping", None)
    if ping is None:
        # Store em memória não tem dependência externa
        return DependencyCheck(status="ok")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(ping(), timeout=STORE_PING_TIMEOUT_SECONDS)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_store_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


def _check_payment_provider(dependencies: GatewayDependencies) -> DependencyCheck:
    if not dependencies.checkout.is_configured:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")
