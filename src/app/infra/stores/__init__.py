"""Stores de infraestrutura (rate limit em memória e Redis)."""

from app.infra.stores.memory_stores import MemoryRateLimitStore
from app.infra.stores.redis_rate_limit_store import RedisRateLimitStore

__all__ = [
    "MemoryRateLimitStore",
    "RedisRateLimitStore",
]
