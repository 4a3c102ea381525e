"""Rate limiter de janela fixa.

Janela fixa (não deslizante) por identificador: a primeira requisição abre
uma janela de `window_ms`; dentro dela o contador sobe e a requisição é
aceita enquanto count <= limit. Na virada da janela o contador zera, então
um cliente pode somar até 2x o limite ao redor da fronteira.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.rate_limit_store import RateLimitStoreProtocol

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class RateLimitConfig:
    """Limite por janela.

    Attributes:
        limit: Máximo de requisições aceitas na janela
        window_ms: Duração da janela em milissegundos
    """

    limit: int = 5
    window_ms: int = 60_000


@dataclass(frozen=True, slots=True)
class RateLimitResult:
    """Resultado de uma verificação.

    reset_at_ms vem preenchido nos dois desfechos para o cliente negado
    saber quando tentar de novo.
    """

    allowed: bool
    remaining: int
    reset_at_ms: int


class RateLimiter:
    """Aplica limites de janela fixa sobre um RateLimitStoreProtocol.

    Args:
        store: Store de contadores (memória ou Redis)
        clock: Relógio em epoch ms (injetável para testes)
    """

    def __init__(
        self,
        store: RateLimitStoreProtocol,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._store = store
        self._clock = clock

    @property
    def store(self) -> RateLimitStoreProtocol:
        return self._store

    async def check(self, identifier: str, config: RateLimitConfig) -> RateLimitResult:
        """Conta a requisição e decide se ela passa."""
        entry = await self._store.increment(identifier, config.window_ms, self._clock())

        if entry.count > config.limit:
            return RateLimitResult(allowed=False, remaining=0, reset_at_ms=entry.reset_at_ms)

        return RateLimitResult(
            allowed=True,
            remaining=config.limit - entry.count,
            reset_at_ms=entry.reset_at_ms,
        )

    async def sweep(self) -> int:
        """Remove janelas expiradas do store."""
        return await self._store.sweep(self._clock())

    async def run_sweeper(self, interval_seconds: float) -> None:
        """Loop periódico de limpeza; roda até ser cancelado."""
        while True:
            await asyncio.sleep(interval_seconds)
            try:
                removed = await self.sweep()
            except Exception:
                logger.exception("rate_limit_sweep_failed")
                continue
            logger.info("rate_limit_sweep_completed", extra={"removed": removed})
