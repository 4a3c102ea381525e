"""Adapters do provedor de pagamento."""

from app.infra.payments.stripe_provider import StripeCheckoutProvider

__all__ = ["StripeCheckoutProvider"]
