"""Verificação de assinatura e parsing do webhook Stripe (sem PII)."""

from __future__ import annotations

import json

import stripe

from app.domain.webhook import WebhookEnvelope
from utils.errors import ServerMisconfigurationError, SignatureInvalidError

DEFAULT_TOLERANCE_SECONDS = 300


class MissingWebhookSecretError(ServerMisconfigurationError):
    """STRIPE_WEBHOOK_SECRET não configurado."""

    public_message = "Server misconfigured: missing STRIPE_WEBHOOK_SECRET."


class MissingSignatureError(SignatureInvalidError):
    """Header Stripe-Signature ausente."""

    public_message = "Missing Stripe-Signature header."


class InvalidSignatureError(SignatureInvalidError):
    """Assinatura não confere ou timestamp fora da tolerância."""

    public_message = "Invalid webhook signature."


class InvalidWebhookPayloadError(SignatureInvalidError):
    """Corpo autenticado mas não decodificável como evento."""

    public_message = "Invalid webhook request body."


def require_webhook_credentials(signature: str | None, secret: str | None) -> str:
    """Valida secret e header antes de qualquer leitura do corpo.

    Raises:
        MissingWebhookSecretError: Secret não configurado
        MissingSignatureError: Header ausente ou vazio

    Returns:
        Header de assinatura sem espaços nas pontas
    """
    if not secret:
        raise MissingWebhookSecretError()
    signature = (signature or "").strip()
    if not signature:
        raise MissingSignatureError()
    return signature


def parse_webhook_request(
    raw_body: bytes,
    signature: str | None,
    secret: str | None,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
) -> WebhookEnvelope:
    """Valida assinatura sobre os bytes crus e constrói o envelope.

    Args:
        raw_body: Corpo exatamente como recebido
        signature: Valor do header Stripe-Signature
        secret: Secret do endpoint (whsec_...)
        tolerance: Janela de aceitação do timestamp em segundos

    Raises:
        MissingWebhookSecretError: Secret não configurado
        MissingSignatureError: Header ausente
        InvalidSignatureError: Assinatura inválida ou expirada
        InvalidWebhookPayloadError: UTF-8 ou JSON inválido após verificação

    Returns:
        WebhookEnvelope autenticado
    """
    signature = require_webhook_credentials(signature, secret)

    try:
        payload_text = raw_body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidWebhookPayloadError() from exc

    try:
        stripe.WebhookSignature.verify_header(payload_text, signature, secret, tolerance=tolerance)
    except stripe.SignatureVerificationError as exc:
        raise InvalidSignatureError() from exc

    try:
        event = json.loads(payload_text)
    except json.JSONDecodeError as exc:
        raise InvalidWebhookPayloadError() from exc

    if not isinstance(event, dict):
        raise InvalidWebhookPayloadError()

    event_type = event.get("type")
    event_id = event.get("id")
    if not isinstance(event_type, str) or not isinstance(event_id, str):
        raise InvalidWebhookPayloadError()

    return WebhookEnvelope(event_type=event_type, event_id=event_id, payload=event)
