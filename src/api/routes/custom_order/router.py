"""Endpoint do formulário de pedido personalizado.

Ordem das checagens: origem → rate limit por IP → Content-Type →
leitura limitada a 3 MiB → JSON → validação → captcha → email.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response

from api.http import (
    empty_response,
    get_client_ip,
    json_response,
    parse_json_body,
    read_body_with_limit,
    require_allowed_origin,
    run_guarded,
)
from api.validators import validate_custom_order_payload
from utils.errors import (
    CaptchaFailedError,
    ClientValidationError,
    RateLimitedError,
    UnsupportedMediaTypeError,
)

if TYPE_CHECKING:
    from app.bootstrap.dependencies import GatewayDependencies
    from app.protocols.captcha import CaptchaVerifierProtocol

logger = logging.getLogger(__name__)

router = APIRouter()

RATE_LIMIT_KEY_PREFIX = "custom-order:"
JSON_CONTENT_TYPE = "application/json"


async def verify_captcha(
    verifier: CaptchaVerifierProtocol | None,
    token: str | None,
    client_ip: str,
) -> None:
    """Exige token válido quando o captcha está habilitado.

    Raises:
        ClientValidationError: Captcha habilitado e token ausente.
        CaptchaFailedError: Token rejeitado.
    """
    if verifier is None:
        return
    if not token:
        raise ClientValidationError("Captcha verification is required.")

    verification = await verifier.verify(token, client_ip)
    if not verification.verified:
        logger.warning(
            "custom_order_captcha_failed",
            extra={"error_codes": list(verification.error_codes)},
        )
        raise CaptchaFailedError()


@router.options("/custom-order")
async def custom_order_preflight(request: Request) -> Response:
    async def _handle(dependencies: GatewayDependencies) -> Response:
        require_allowed_origin(request, dependencies.allowed_origins)
        return empty_response(request, dependencies.allowed_origins)

    return await run_guarded(request, "custom_order", _handle)


@router.post("/custom-order")
async def submit_custom_order(request: Request) -> Response:
    """Recebe o formulário e encaminha o pedido por email."""

    async def _handle(dependencies: GatewayDependencies) -> Response:
        require_allowed_origin(request, dependencies.allowed_origins)

        client_ip = get_client_ip(request)
        rate = await dependencies.rate_limiter.check(
            f"{RATE_LIMIT_KEY_PREFIX}{client_ip}",
            dependencies.custom_order_rate_limit,
        )
        if not rate.allowed:
            logger.warning("custom_order_rate_limited", extra={"reset_at_ms": rate.reset_at_ms})
            raise RateLimitedError(rate.reset_at_ms)

        content_type = (request.headers.get("content-type") or "").lower()
        if not content_type.startswith(JSON_CONTENT_TYPE):
            raise UnsupportedMediaTypeError()

        raw_body = await read_body_with_limit(request, dependencies.custom_order_max_body_bytes)
        result = validate_custom_order_payload(parse_json_body(raw_body))
        if not result.ok:
            logger.info("custom_order_payload_invalid", extra={"reason": result.error})
            raise ClientValidationError(result.error)

        payload = result.value
        await verify_captcha(dependencies.captcha_verifier, payload.captcha_token, client_ip)

        message = await dependencies.custom_orders.execute(payload, client_ip)
        return json_response(
            {"success": True, "message": message},
            request,
            dependencies.allowed_origins,
        )

    return await run_guarded(request, "custom_order", _handle)
