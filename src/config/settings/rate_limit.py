"""Settings de rate limiting.

Configurações para proteção contra abuso do formulário público.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

RateLimitBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class RateLimitSettings:
    """Configurações de rate limiting.

    Attributes:
        backend: Store de contadores (memory|redis)
        custom_order_limit: Requisições permitidas por janela
        custom_order_window_seconds: Duração da janela fixa
        sweep_interval_seconds: Intervalo da limpeza de janelas expiradas
    """

    backend: RateLimitBackend = "memory"
    custom_order_limit: int = 5
    custom_order_window_seconds: int = 60
    sweep_interval_seconds: int = 3600

    def validate(self, redis_url: str = "") -> list[str]:
        """Valida configurações de rate limiting.

        Args:
            redis_url: URL do Redis (obrigatória para backend redis).

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append("RATE_LIMIT_BACKEND deve ser 'memory' ou 'redis'")

        if self.backend == "redis" and not redis_url:
            errors.append("REDIS_URL obrigatório para RATE_LIMIT_BACKEND=redis")

        if self.custom_order_limit < 1:
            errors.append("CUSTOM_ORDER_RATE_LIMIT deve ser >= 1")

        if self.custom_order_window_seconds < 1:
            errors.append("CUSTOM_ORDER_RATE_WINDOW_SECONDS deve ser >= 1")

        if self.sweep_interval_seconds < 1:
            errors.append("RATE_LIMIT_SWEEP_INTERVAL_SECONDS deve ser >= 1")

        return errors


def _load_from_env() -> RateLimitSettings:
    """Carrega RateLimitSettings de variáveis de ambiente."""
    backend = os.getenv("RATE_LIMIT_BACKEND", "memory").strip().lower()
    return RateLimitSettings(
        backend=backend,  # type: ignore[arg-type]
        custom_order_limit=int(os.getenv("CUSTOM_ORDER_RATE_LIMIT", "5")),
        custom_order_window_seconds=int(os.getenv("CUSTOM_ORDER_RATE_WINDOW_SECONDS", "60")),
        sweep_interval_seconds=int(os.getenv("RATE_LIMIT_SWEEP_INTERVAL_SECONDS", "3600")),
    )


@lru_cache(maxsize=1)
def get_rate_limit_settings() -> RateLimitSettings:
    """Retorna instância cacheada de RateLimitSettings."""
    return _load_from_env()
