"""Roteamento de eventos de pagamento já autenticados.

Sem persistência: cada evento suportado gera um log estruturado com o
resumo necessário para conciliação manual.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.webhook import WebhookEnvelope
    from app.protocols.payment_provider import PaymentProviderProtocol

logger = logging.getLogger(__name__)

CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"
PAYMENT_INTENT_SUCCEEDED = "payment_intent.succeeded"


def extract_customer_id(customer: Any) -> str | None:
    """Customer pode vir como id (str) ou objeto expandido."""
    if not customer:
        return None
    if isinstance(customer, str):
        return customer
    if isinstance(customer, dict):
        customer_id = customer.get("id")
        return customer_id if isinstance(customer_id, str) else None
    return None


class PaymentEventRouter:
    """Despacha eventos por tipo.

    Args:
        provider: Provedor usado para buscar line items (opcional)
    """

    def __init__(self, provider: PaymentProviderProtocol | None = None) -> None:
        self._provider = provider

    async def route(self, envelope: WebhookEnvelope) -> str:
        """Processa o evento e retorna o desfecho ("handled" | "ignored")."""
        if envelope.event_type == CHECKOUT_SESSION_COMPLETED:
            await self._handle_checkout_completed(envelope)
            return "handled"

        if envelope.event_type == PAYMENT_INTENT_SUCCEEDED:
            self._handle_payment_intent_succeeded(envelope)
            return "handled"

        logger.info(
            "webhook_unhandled_event",
            extra={"event_type": envelope.event_type, "event_id": envelope.event_id},
        )
        return "ignored"

    async def _handle_checkout_completed(self, envelope: WebhookEnvelope) -> None:
        session = envelope.data_object
        session_id = session.get("id")
        line_items = None
        if isinstance(session_id, str) and session_id:
            line_items = await self._safe_list_line_items(session_id)

        logger.info(
            CHECKOUT_SESSION_COMPLETED,
            extra={
                "event_id": envelope.event_id,
                "session_id": session_id,
                "session_status": session.get("status"),
                "payment_status": session.get("payment_status"),
                "amount_total": session.get("amount_total"),
                "currency": session.get("currency"),
                "customer_id": extract_customer_id(session.get("customer")),
                "line_items": line_items,
            },
        )

    def _handle_payment_intent_succeeded(self, envelope: WebhookEnvelope) -> None:
        intent = envelope.data_object
        logger.info(
            PAYMENT_INTENT_SUCCEEDED,
            extra={
                "event_id": envelope.event_id,
                "payment_intent_id": intent.get("id"),
                "status": intent.get("status"),
                "amount": intent.get("amount"),
                "currency": intent.get("currency"),
                "customer_id": extract_customer_id(intent.get("customer")),
            },
        )

    async def _safe_list_line_items(self, session_id: str) -> list[dict[str, Any]] | None:
        if self._provider is None:
            return None
        try:
            return await self._provider.list_line_items(session_id)
        except Exception as exc:
            logger.error(
                "webhook_list_line_items_failed",
                extra={"session_id": session_id, "error_type": type(exc).__name__},
            )
            return None
