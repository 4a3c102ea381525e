"""Endpoint de checkout do carrinho.

Endpoints:
- OPTIONS /checkout: preflight (com gate de origem)
- POST /checkout: cria sessão de checkout e devolve {url, id}

Fluxo do POST:
1. Gate de origem (403 antes de ler o corpo)
2. Configuração obrigatória (URLs e chave do provedor)
3. Leitura limitada a 1 MiB e parse JSON
4. Validação/sanitização e allowlist de preços
5. Criação da sessão com Idempotency-Key repassado
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response

from api.http import (
    empty_response,
    json_response,
    parse_json_body,
    read_body_with_limit,
    require_allowed_origin,
    run_guarded,
)
from api.validators import validate_checkout_payload
from app.services.price_allowlist import enforce_price_allowlist
from app.use_cases.checkout import normalize_idempotency_key
from utils.errors import ClientValidationError

if TYPE_CHECKING:
    from app.bootstrap.dependencies import GatewayDependencies

logger = logging.getLogger(__name__)

router = APIRouter()


@router.options("/checkout")
async def checkout_preflight(request: Request) -> Response:
    """Preflight CORS do checkout."""

    async def _handle(dependencies: GatewayDependencies) -> Response:
        require_allowed_origin(request, dependencies.allowed_origins)
        return empty_response(request, dependencies.allowed_origins)

    return await run_guarded(request, "checkout", _handle)


@router.post("/checkout")
async def create_checkout(request: Request) -> Response:
    """Cria uma sessão de checkout para o carrinho enviado."""

    async def _handle(dependencies: GatewayDependencies) -> Response:
        require_allowed_origin(request, dependencies.allowed_origins)
        dependencies.checkout.ensure_configured()

        raw_body = await read_body_with_limit(request, dependencies.checkout_max_body_bytes)
        result = validate_checkout_payload(parse_json_body(raw_body))
        if not result.ok:
            logger.info("checkout_payload_invalid", extra={"reason": result.error})
            raise ClientValidationError(result.error)

        payload = result.value
        enforce_price_allowlist(payload.price_ids, dependencies.price_allowlist)

        session = await dependencies.checkout.create_session(
            payload,
            idempotency_key=normalize_idempotency_key(request.headers.get("idempotency-key")),
        )
        return json_response(
            {"url": session.url, "id": session.id},
            request,
            dependencies.allowed_origins,
        )

    return await run_guarded(request, "checkout", _handle)
