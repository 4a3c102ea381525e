"""Settings de CORS e allowlist de origens.

ALLOWED_ORIGIN aceita uma ou mais origens separadas por vírgula.
Lista vazia desabilita a verificação de origem.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import parse_csv


@dataclass(frozen=True)
class CorsSettings:
    """Política de origens permitidas.

    Attributes:
        allowed_origins: Origens aceitas (match exato). Vazio = todas.
    """

    allowed_origins: tuple[str, ...] = ()

    @property
    def enforced(self) -> bool:
        """True quando existe allowlist configurada."""
        return bool(self.allowed_origins)

    def validate(self) -> list[str]:
        errors: list[str] = []
        for origin in self.allowed_origins:
            if not origin.startswith(("http://", "https://")):
                errors.append(f"ALLOWED_ORIGIN inválida: {origin}")
        return errors


def _load_from_env() -> CorsSettings:
    """Carrega CorsSettings a partir de variáveis de ambiente."""
    return CorsSettings(allowed_origins=parse_csv(os.getenv("ALLOWED_ORIGIN", "")))


@lru_cache(maxsize=1)
def get_cors_settings() -> CorsSettings:
    """Retorna instância cacheada de CorsSettings."""
    return _load_from_env()
