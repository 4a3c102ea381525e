"""Webhook Stripe: assinatura e parsing seguro."""

from .receive import (
    DEFAULT_TOLERANCE_SECONDS,
    InvalidSignatureError,
    InvalidWebhookPayloadError,
    MissingSignatureError,
    MissingWebhookSecretError,
    parse_webhook_request,
    require_webhook_credentials,
)

__all__ = [
    "DEFAULT_TOLERANCE_SECONDS",
    "InvalidSignatureError",
    "InvalidWebhookPayloadError",
    "MissingSignatureError",
    "MissingWebhookSecretError",
    "parse_webhook_request",
    "require_webhook_credentials",
]
