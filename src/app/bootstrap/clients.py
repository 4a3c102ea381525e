"""Factories de clientes externos — Redis e Stripe."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.payments import StripeCheckoutProvider

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

    from config.settings import StripeSettings

logger = logging.getLogger(__name__)


def create_async_redis_client(redis_url: str) -> AsyncRedis:
    """Cria cliente Redis assíncrono.

    Raises:
        ValueError: Se redis_url não configurado
    """
    from redis.asyncio import Redis as AsyncRedis

    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client: AsyncRedis = AsyncRedis.from_url(
        redis_url,
        decode_responses=True,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
        retry_on_timeout=True,
    )
    host = client.connection_pool.connection_kwargs.get("host", "unknown")
    logger.info("async_redis_client_created", extra={"host": host})
    return client


def create_payment_provider(settings: StripeSettings) -> StripeCheckoutProvider | None:
    """Cria o handle do Stripe uma única vez por processo.

    Returns:
        Provider configurado ou None se STRIPE_SECRET_KEY ausente.
    """
    if not settings.secret_key:
        logger.warning("stripe_provider_not_configured", extra={"reason": "missing_secret_key"})
        return None
    return StripeCheckoutProvider(api_key=settings.secret_key, api_version=settings.api_version)
