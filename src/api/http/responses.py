"""Respostas JSON com headers CORS."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from fastapi.responses import JSONResponse, Response

from api.http.origin import cors_headers
from utils.errors import RateLimitedError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from starlette.requests import Request

    from utils.errors import GatewayError


def _origin(request: Request) -> str | None:
    return request.headers.get("origin")


def json_response(
    content: dict[str, Any],
    request: Request,
    allowed_origins: Sequence[str],
    status_code: int = 200,
) -> JSONResponse:
    """Resposta JSON de sucesso."""
    return JSONResponse(
        content=content,
        status_code=status_code,
        headers=cors_headers(_origin(request), allowed_origins),
    )


def json_error(
    message: str,
    status_code: int,
    request: Request,
    allowed_origins: Sequence[str],
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    """Resposta de erro no formato {"error": "..."}."""
    content: dict[str, Any] = {"error": message}
    if extra:
        content.update(extra)
    return json_response(content, request, allowed_origins, status_code=status_code)


def error_response(
    exc: GatewayError,
    request: Request,
    allowed_origins: Sequence[str],
) -> JSONResponse:
    """Converte um GatewayError na resposta pública correspondente."""
    extra: dict[str, Any] | None = None
    if isinstance(exc, RateLimitedError):
        reset_at = datetime.fromtimestamp(exc.reset_at_ms / 1000, tz=UTC)
        extra = {"resetAt": reset_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")}
    return json_error(exc.public_message, exc.status_code, request, allowed_origins, extra)


def empty_response(
    request: Request,
    allowed_origins: Sequence[str],
    status_code: int = 204,
) -> Response:
    """Resposta sem corpo (preflight OPTIONS)."""
    return Response(status_code=status_code, headers=cors_headers(_origin(request), allowed_origins))
