"""Protocolo de store para contadores de rate limit.

Permite trocar o store em memória por um store compartilhado (Redis)
sem alterar os pontos de chamada.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RateLimitEntry:
    """Contador de uma janela fixa para um identificador.

    Attributes:
        identifier: Chave do cliente (ex.: "custom-order:203.0.113.7")
        count: Requisições já contadas na janela
        reset_at_ms: Epoch em ms em que a janela expira
    """

    identifier: str
    count: int
    reset_at_ms: int

    def is_expired(self, now_ms: int) -> bool:
        return self.reset_at_ms < now_ms


class RateLimitStoreProtocol(ABC):
    """Contrato mínimo assíncrono para stores de rate limit.

    Métodos canônicos:
    - get(identifier, now_ms) -> RateLimitEntry | None
    - increment(identifier, window_ms, now_ms) -> RateLimitEntry
      Abre nova janela (count=1) se ausente/expirada, senão incrementa.
      Deve ser atômico por identificador.
    - sweep(now_ms) -> int
      Remove janelas expiradas e retorna quantas foram removidas.
    """

    @abstractmethod
    async def get(self, identifier: str, now_ms: int) -> RateLimitEntry | None:
        """Retorna a janela ativa do identificador, se houver."""

    @abstractmethod
    async def increment(self, identifier: str, window_ms: int, now_ms: int) -> RateLimitEntry:
        """Conta uma requisição e retorna o estado resultante da janela."""

    @abstractmethod
    async def sweep(self, now_ms: int) -> int:
        """Remove janelas expiradas."""
