"""Modelos de domínio do gateway (checkout, pedido personalizado, webhook)."""

from app.domain.checkout import (
    MAX_LINE_ITEMS,
    MAX_QUANTITY,
    CheckoutItemRequest,
    CheckoutSession,
    ValidatedCheckoutPayload,
)
from app.domain.custom_order import MAX_COLORS, CustomOrderPayload
from app.domain.webhook import WebhookEnvelope

__all__ = [
    "MAX_COLORS",
    "MAX_LINE_ITEMS",
    "MAX_QUANTITY",
    "CheckoutItemRequest",
    "CheckoutSession",
    "CustomOrderPayload",
    "ValidatedCheckoutPayload",
    "WebhookEnvelope",
]
