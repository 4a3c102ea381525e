"""Settings de verificação de captcha (Cloudflare Turnstile).

Opt-in: sem TURNSTILE_SECRET_KEY a verificação é ignorada.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TURNSTILE_VERIFY_URL: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify"


@dataclass(frozen=True)
class CaptchaSettings:
    """Configurações do verificador de captcha.

    Attributes:
        secret_key: Secret do Turnstile (vazio = desabilitado)
        verify_url: Endpoint de verificação
        request_timeout_seconds: Timeout da chamada de verificação
    """

    secret_key: str = ""
    verify_url: str = TURNSTILE_VERIFY_URL
    request_timeout_seconds: float = 5.0

    @property
    def enabled(self) -> bool:
        return bool(self.secret_key)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.request_timeout_seconds <= 0:
            errors.append("CAPTCHA_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> CaptchaSettings:
    """Carrega CaptchaSettings de variáveis de ambiente."""
    return CaptchaSettings(
        secret_key=os.getenv("TURNSTILE_SECRET_KEY", "").strip(),
        verify_url=os.getenv("TURNSTILE_VERIFY_URL", TURNSTILE_VERIFY_URL),
        request_timeout_seconds=float(os.getenv("CAPTCHA_REQUEST_TIMEOUT_SECONDS", "5")),
    )


@lru_cache(maxsize=1)
def get_captcha_settings() -> CaptchaSettings:
    """Retorna instância cacheada de CaptchaSettings."""
    return _load_from_env()
