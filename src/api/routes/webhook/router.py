"""Endpoint de webhook do provedor de pagamento.

Endpoints:
- OPTIONS /webhook: preflight (sem gate de origem)
- POST /webhook: recebe eventos assinados

Segurança:
- Secret e header Stripe-Signature checados antes de ler o corpo
- Assinatura verificada sobre os bytes crus, sem re-serialização
- Corpo limitado (STRIPE_WEBHOOK_MAX_BODY_BYTES)
- Sem gate de origem: chamada servidor-a-servidor
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response

from api.connectors.stripe.webhook import parse_webhook_request, require_webhook_credentials
from api.http import empty_response, json_response, read_body_with_limit, run_guarded

if TYPE_CHECKING:
    from app.bootstrap.dependencies import GatewayDependencies

logger = logging.getLogger(__name__)

router = APIRouter()


@router.options("/webhook")
async def webhook_preflight(request: Request) -> Response:
    async def _handle(dependencies: GatewayDependencies) -> Response:
        return empty_response(request, dependencies.allowed_origins)

    return await run_guarded(request, "webhook", _handle)


@router.post("/webhook")
async def receive_webhook(request: Request) -> Response:
    """Recebimento de eventos — responde {"received": true} após roteamento."""

    async def _handle(dependencies: GatewayDependencies) -> Response:
        signature = require_webhook_credentials(
            request.headers.get("stripe-signature"),
            dependencies.webhook_secret,
        )
        raw_body = await read_body_with_limit(request, dependencies.webhook_max_body_bytes)
        envelope = parse_webhook_request(raw_body, signature, dependencies.webhook_secret)

        logger.info(
            "webhook_received",
            extra={"event_type": envelope.event_type, "event_id": envelope.event_id},
        )
        outcome = await dependencies.payment_events.route(envelope)
        logger.info(
            "webhook_processed",
            extra={"event_type": envelope.event_type, "outcome": outcome},
        )
        return json_response({"received": True}, request, dependencies.allowed_origins)

    return await run_guarded(request, "webhook", _handle)
