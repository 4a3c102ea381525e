"""Casos de uso do gateway (checkout, eventos de pagamento, pedido personalizado)."""

from app.use_cases.checkout import CheckoutOrchestrator, normalize_idempotency_key
from app.use_cases.custom_order import SubmitCustomOrderUseCase, build_order_email
from app.use_cases.payment_events import PaymentEventRouter

__all__ = [
    "CheckoutOrchestrator",
    "PaymentEventRouter",
    "SubmitCustomOrderUseCase",
    "build_order_email",
    "normalize_idempotency_key",
]
