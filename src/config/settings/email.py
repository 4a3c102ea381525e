"""Settings de envio de email (Resend HTTP API).

Usado pelo formulário de pedido personalizado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

RESEND_API_BASE_URL: str = "https://api.resend.com"
DEFAULT_FROM_ADDRESS: str = "StitchWyse Orders <onboarding@resend.dev>"


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do canal de email.

    Attributes:
        resend_api_key: Chave da API Resend
        order_email: Destinatário dos pedidos personalizados
        from_address: Remetente exibido
        api_base_url: URL base da API Resend
        request_timeout_seconds: Timeout das requisições HTTP
    """

    resend_api_key: str = ""
    order_email: str = ""
    from_address: str = DEFAULT_FROM_ADDRESS
    api_base_url: str = RESEND_API_BASE_URL
    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas de email."""
        errors: list[str] = []
        if not self.order_email:
            errors.append("ORDER_EMAIL não configurado")
        if not self.resend_api_key:
            errors.append("RESEND_API_KEY não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("EMAIL_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        resend_api_key=os.getenv("RESEND_API_KEY", "").strip(),
        order_email=os.getenv("ORDER_EMAIL", "").strip(),
        from_address=os.getenv("ORDER_EMAIL_FROM", "").strip() or DEFAULT_FROM_ADDRESS,
        api_base_url=os.getenv("RESEND_API_BASE_URL", RESEND_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("EMAIL_REQUEST_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
