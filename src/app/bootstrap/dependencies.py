"""Composition root — dependências compartilhadas entre requisições.

Construídas uma vez no lifespan da aplicação e guardadas em `app.state`.
Handlers recebem tudo daqui; não há singletons mutáveis em módulo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.bootstrap.clients import create_async_redis_client, create_payment_provider
from app.infra.captcha import TurnstileVerifier
from app.infra.email import ResendEmailSender
from app.infra.stores import MemoryRateLimitStore, RedisRateLimitStore
from app.protocols.captcha import CaptchaVerifierProtocol
from app.protocols.rate_limit_store import RateLimitStoreProtocol
from app.services.price_allowlist import PriceAllowlistConfig
from app.services.rate_limiter import RateLimitConfig, RateLimiter
from app.use_cases.checkout import CheckoutOrchestrator
from app.use_cases.custom_order import SubmitCustomOrderUseCase
from app.use_cases.payment_events import PaymentEventRouter
from config.settings import (
    BaseSettings,
    CaptchaSettings,
    CorsSettings,
    EmailSettings,
    RateLimitSettings,
    StripeSettings,
    get_base_settings,
    get_captcha_settings,
    get_cors_settings,
    get_email_settings,
    get_rate_limit_settings,
    get_stripe_settings,
)

logger = logging.getLogger(__name__)

CHECKOUT_MAX_BODY_BYTES = 1 * 1024 * 1024
CUSTOM_ORDER_MAX_BODY_BYTES = 3 * 1024 * 1024


@dataclass(frozen=True)
class GatewayDependencies:
    """Tudo que os handlers precisam, montado uma vez por processo."""

    allowed_origins: tuple[str, ...]
    rate_limiter: RateLimiter
    custom_order_rate_limit: RateLimitConfig
    price_allowlist: PriceAllowlistConfig
    checkout: CheckoutOrchestrator
    payment_events: PaymentEventRouter
    custom_orders: SubmitCustomOrderUseCase
    captcha_verifier: CaptchaVerifierProtocol | None = None
    webhook_secret: str = ""
    webhook_max_body_bytes: int = 64 * 1024
    checkout_max_body_bytes: int = CHECKOUT_MAX_BODY_BYTES
    custom_order_max_body_bytes: int = CUSTOM_ORDER_MAX_BODY_BYTES
    sweep_interval_seconds: int = 3600


def create_rate_limit_store(
    rate_limit: RateLimitSettings, base: BaseSettings
) -> RateLimitStoreProtocol:
    """Cria store de rate limit conforme RATE_LIMIT_BACKEND.

    - "memory": MemoryRateLimitStore (instância única)
    - "redis": RedisRateLimitStore (múltiplas instâncias)
    """
    if rate_limit.backend == "redis":
        try:
            store = RedisRateLimitStore(create_async_redis_client(base.redis_url))
        except Exception as exc:
            logger.error("rate_limit_store_redis_failed", extra={"error_type": type(exc).__name__})
            raise
        logger.info("rate_limit_store_created", extra={"backend": "redis"})
        return store

    logger.info("rate_limit_store_created", extra={"backend": "memory"})
    return MemoryRateLimitStore()


def create_email_sender(settings: EmailSettings) -> ResendEmailSender | None:
    """Cria sender Resend; None se RESEND_API_KEY ausente."""
    if not settings.resend_api_key:
        return None
    return ResendEmailSender(
        api_key=settings.resend_api_key,
        from_address=settings.from_address,
        base_url=settings.api_base_url,
        timeout_seconds=settings.request_timeout_seconds,
    )


def create_captcha_verifier(settings: CaptchaSettings) -> TurnstileVerifier | None:
    """Cria verificador Turnstile; None desabilita o captcha."""
    if not settings.enabled:
        return None
    return TurnstileVerifier(
        secret_key=settings.secret_key,
        verify_url=settings.verify_url,
        timeout_seconds=settings.request_timeout_seconds,
    )


def build_dependencies(
    *,
    base: BaseSettings | None = None,
    cors: CorsSettings | None = None,
    stripe_settings: StripeSettings | None = None,
    email: EmailSettings | None = None,
    captcha: CaptchaSettings | None = None,
    rate_limit: RateLimitSettings | None = None,
) -> GatewayDependencies:
    """Monta GatewayDependencies a partir das settings (env por padrão)."""
    base = base or get_base_settings()
    cors = cors or get_cors_settings()
    stripe_settings = stripe_settings or get_stripe_settings()
    email = email or get_email_settings()
    captcha = captcha or get_captcha_settings()
    rate_limit = rate_limit or get_rate_limit_settings()

    provider = create_payment_provider(stripe_settings)

    return GatewayDependencies(
        allowed_origins=cors.allowed_origins,
        rate_limiter=RateLimiter(create_rate_limit_store(rate_limit, base)),
        custom_order_rate_limit=RateLimitConfig(
            limit=rate_limit.custom_order_limit,
            window_ms=rate_limit.custom_order_window_seconds * 1000,
        ),
        price_allowlist=PriceAllowlistConfig(
            enforce=stripe_settings.enforce_price_allowlist,
            allowed_price_ids=stripe_settings.allowed_price_ids,
        ),
        checkout=CheckoutOrchestrator(
            provider=provider,
            success_url=stripe_settings.success_url,
            cancel_url=stripe_settings.cancel_url,
            default_currency=stripe_settings.default_currency,
        ),
        payment_events=PaymentEventRouter(provider),
        custom_orders=SubmitCustomOrderUseCase(
            email_sender=create_email_sender(email),
            order_email=email.order_email,
        ),
        captcha_verifier=create_captcha_verifier(captcha),
        webhook_secret=stripe_settings.webhook_secret,
        webhook_max_body_bytes=stripe_settings.webhook_max_body_bytes,
        sweep_interval_seconds=rate_limit.sweep_interval_seconds,
    )
