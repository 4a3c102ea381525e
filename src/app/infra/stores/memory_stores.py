"""Stores em memória.

Contadores valem por instância do processo: não há coordenação entre
réplicas. Para múltiplas instâncias, usar RedisRateLimitStore.
"""

from __future__ import annotations

import logging
import asyncio

from app.protocols.rate_limit_store import RateLimitEntry, RateLimitStoreProtocol

logger = logging.getLogger(__name__)


class MemoryRateLimitStore(RateLimitStoreProtocol):
    """Store de janelas fixas em memória.

    O lock serializa o passo incrementa-e-compara para o mesmo
    identificador (requisições concorrentes não perdem contagem).
    """

    def __init__(self) -> None:
        self._entries: dict[str, RateLimitEntry] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, identifier: str, now_ms: int) -> RateLimitEntry | None:
        entry = self._entries.get(identifier)
        if entry is None or entry.is_expired(now_ms):
            return None
        return entry

    async def increment(self, identifier: str, window_ms: int, now_ms: int) -> RateLimitEntry:
        async with self._lock:
            current = self._entries.get(identifier)
            if current is None or current.is_expired(now_ms):
                updated = RateLimitEntry(
                    identifier=identifier,
                    count=1,
                    reset_at_ms=now_ms + window_ms,
                )
            else:
                updated = RateLimitEntry(
                    identifier=identifier,
                    count=current.count + 1,
                    reset_at_ms=current.reset_at_ms,
                )
            self._entries[identifier] = updated
            return updated

    async def sweep(self, now_ms: int) -> int:
        async with self._lock:
            expired = [key for key, entry in self._entries.items() if entry.is_expired(now_ms)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("rate_limit_swept", extra={"removed": len(expired)})
        return len(expired)
