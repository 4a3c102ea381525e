"""Contexto por requisição: correlation id, IP do cliente e dependências."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from api.http.origin import is_origin_allowed
from app.observability import CORRELATION_HEADER, reset_correlation_id, set_correlation_id
from utils.errors import ForbiddenOriginError, ServerMisconfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from starlette.requests import Request

    from app.bootstrap.dependencies import GatewayDependencies

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT_IP = "unknown"
MAX_CLIENT_IP_LENGTH = 100


@contextmanager
def correlation_scope(request: Request) -> Iterator[None]:
    """Define o correlation_id durante o handler e restaura no final."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        yield
    finally:
        reset_correlation_id(token)


def get_client_ip(request: Request) -> str:
    """IP do cliente: primeiro hop de X-Forwarded-For, senão X-Real-IP."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop[:MAX_CLIENT_IP_LENGTH]

    real_ip = (request.headers.get("x-real-ip") or "").strip()
    if real_ip:
        return real_ip[:MAX_CLIENT_IP_LENGTH]

    return UNKNOWN_CLIENT_IP


def get_dependencies(request: Request) -> GatewayDependencies:
    """Dependências montadas no lifespan (app.state.dependencies).

    Raises:
        ServerMisconfigurationError: App iniciado sem dependências.
    """
    dependencies = getattr(request.app.state, "dependencies", None)
    if dependencies is None:
        raise ServerMisconfigurationError()
    return dependencies


def require_allowed_origin(request: Request, allowed_origins: Sequence[str]) -> None:
    """Gate de origem para endpoints chamados pelo browser.

    Raises:
        ForbiddenOriginError: Origem ausente ou fora da allowlist.
    """
    origin = request.headers.get("origin")
    if not is_origin_allowed(origin, allowed_origins):
        logger.warning(
            "request_origin_forbidden",
            extra={"origin": origin or None, "path": request.url.path},
        )
        raise ForbiddenOriginError()
