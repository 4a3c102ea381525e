"""Testes do RedisRateLimitStore com mock."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.infra.stores import RedisRateLimitStore
from utils.errors import RedisConnectionError


def _redis_with_pipeline(results: list) -> tuple[MagicMock, MagicMock]:
    redis_client = MagicMock()
    pipeline = MagicMock()
    pipeline.execute = AsyncMock(return_value=results)
    redis_client.pipeline.return_value = pipeline
    redis_client.pexpire = AsyncMock(return_value=True)
    return redis_client, pipeline


class TestRedisRateLimitStore:
    """Testes do RedisRateLimitStore."""

    @pytest.mark.asyncio
    async def test_increment_uses_single_transaction(self) -> None:
        """SET NX PX + INCR + PTTL no mesmo MULTI."""
        redis_client, pipeline = _redis_with_pipeline([True, 1, 60_000])
        store = RedisRateLimitStore(redis_client)

        entry = await store.increment("custom-order:1.2.3.4", window_ms=60_000, now_ms=1000)

        redis_client.pipeline.assert_called_once_with(transaction=True)
        pipeline.set.assert_called_once_with(
            "ratelimit:custom-order:1.2.3.4", 0, nx=True, px=60_000
        )
        pipeline.incr.assert_called_once_with("ratelimit:custom-order:1.2.3.4")
        assert entry.count == 1
        assert entry.reset_at_ms == 61_000

    @pytest.mark.asyncio
    async def test_increment_restores_missing_ttl(self) -> None:
        redis_client, _ = _redis_with_pipeline([None, 4, -1])
        store = RedisRateLimitStore(redis_client)

        entry = await store.increment("k", window_ms=30_000, now_ms=0)

        redis_client.pexpire.assert_awaited_once_with("ratelimit:k", 30_000)
        assert entry.count == 4
        assert entry.reset_at_ms == 30_000

    @pytest.mark.asyncio
    async def test_get_returns_active_window(self) -> None:
        redis_client, _ = _redis_with_pipeline(["3", 10_000])
        store = RedisRateLimitStore(redis_client)

        entry = await store.get("k", now_ms=500)

        assert entry is not None
        assert entry.count == 3
        assert entry.reset_at_ms == 10_500

    @pytest.mark.asyncio
    async def test_get_missing_key(self) -> None:
        redis_client, _ = _redis_with_pipeline([None, -2])
        store = RedisRateLimitStore(redis_client)

        assert await store.get("k", now_ms=0) is None

    @pytest.mark.asyncio
    async def test_redis_failure_is_wrapped(self) -> None:
        redis_client, pipeline = _redis_with_pipeline([])
        pipeline.execute = AsyncMock(side_effect=ConnectionError("down"))
        store = RedisRateLimitStore(redis_client)

        with pytest.raises(RedisConnectionError):
            await store.increment("k", window_ms=1000, now_ms=0)

    @pytest.mark.asyncio
    async def test_sweep_is_noop(self) -> None:
        store = RedisRateLimitStore(MagicMock())
        assert await store.sweep(now_ms=0) == 0

    @pytest.mark.asyncio
    async def test_close_closes_client(self) -> None:
        redis_client = MagicMock()
        redis_client.aclose = AsyncMock()

        await RedisRateLimitStore(redis_client).close()

        redis_client.aclose.assert_awaited_once()
