"""Redis Rate Limit Store — contadores compartilhados entre instâncias.

A janela é criada com SET NX PX e contada com INCR no mesmo MULTI,
então réplicas concorrentes enxergam o mesmo contador. A expiração
fica a cargo do TTL do Redis.

Contrato de Keys:
    Identificadores não devem conter PII além do IP do cliente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.rate_limit_store import RateLimitEntry, RateLimitStoreProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

RATE_LIMIT_PREFIX = "ratelimit:"


class RedisRateLimitStore(RateLimitStoreProtocol):
    """Store de rate limit usando Redis (Upstash compatível).

    Args:
        async_redis_client: Cliente Redis assíncrono
    """

    def __init__(self, async_redis_client: AsyncRedis) -> None:
        self._redis = async_redis_client

    def _key(self, identifier: str) -> str:
        return f"{RATE_LIMIT_PREFIX}{identifier}"

    async def get(self, identifier: str, now_ms: int) -> RateLimitEntry | None:
        try:
            pipeline = self._redis.pipeline()
            pipeline.get(self._key(identifier))
            pipeline.pttl(self._key(identifier))
            raw_count, ttl_ms = await pipeline.execute()
        except Exception as exc:
            raise RedisConnectionError("Falha ao consultar rate limit no Redis") from exc

        if raw_count is None or ttl_ms is None or ttl_ms < 0:
            return None
        return RateLimitEntry(
            identifier=identifier,
            count=int(raw_count),
            reset_at_ms=now_ms + int(ttl_ms),
        )

    async def increment(self, identifier: str, window_ms: int, now_ms: int) -> RateLimitEntry:
        key = self._key(identifier)
        try:
            pipeline = self._redis.pipeline(transaction=True)
            pipeline.set(key, 0, nx=True, px=window_ms)
            pipeline.incr(key)
            pipeline.pttl(key)
            _created, count, ttl_ms = await pipeline.execute()
            if ttl_ms is None or ttl_ms < 0:
                # Chave sem TTL (criada fora deste store): reabre a janela
                await self._redis.pexpire(key, window_ms)
                ttl_ms = window_ms
        except Exception as exc:
            raise RedisConnectionError("Falha ao incrementar rate limit no Redis") from exc

        return RateLimitEntry(
            identifier=identifier,
            count=int(count),
            reset_at_ms=now_ms + int(ttl_ms),
        )

    async def sweep(self, now_ms: int) -> int:
        # TTL do Redis já remove janelas expiradas
        return 0

    async def ping(self) -> bool:
        return bool(await self._redis.ping())

    async def close(self) -> None:
        await self._redis.aclose()
