"""Execução de handlers com tradução uniforme de erros.

Todo GatewayError vira `{"error": ...}` com o status da exceção e headers
CORS; falhas inesperadas são logadas e respondidas como 500 genérico.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.http.request_context import correlation_scope, get_dependencies
from api.http.responses import error_response, json_error
from utils.errors import GatewayError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from starlette.requests import Request
    from starlette.responses import Response

    from app.bootstrap.dependencies import GatewayDependencies

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error."


async def run_guarded(
    request: Request,
    route: str,
    handler: Callable[[GatewayDependencies], Awaitable[Response]],
) -> Response:
    """Roda `handler` dentro do escopo de correlation id.

    Args:
        request: Request atual
        route: Nome curto da rota para os logs
        handler: Corpo do endpoint, recebe as dependências do app
    """
    with correlation_scope(request):
        allowed_origins: Sequence[str] = ()
        try:
            dependencies = get_dependencies(request)
            allowed_origins = dependencies.allowed_origins
            return await handler(dependencies)
        except GatewayError as exc:
            logger.info(
                "request_rejected",
                extra={
                    "route": route,
                    "status_code": exc.status_code,
                    "error_type": type(exc).__name__,
                },
            )
            return error_response(exc, request, allowed_origins)
        except Exception:
            logger.exception("request_failed", extra={"route": route})
            return json_error(INTERNAL_ERROR_MESSAGE, 500, request, allowed_origins)
