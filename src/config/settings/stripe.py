"""Settings específicas do Stripe.

Credenciais, URLs de retorno do checkout e allowlist de price IDs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from config.settings.base import parse_csv, parse_environment

STRIPE_API_VERSION: str = "2023-10-16"
DEFAULT_CURRENCY: str = "gbp"
DEFAULT_WEBHOOK_MAX_BODY_BYTES: int = 64 * 1024


def is_absolute_url(value: str) -> bool:
    """Retorna True para URLs absolutas http(s)."""
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


@dataclass(frozen=True)
class StripeSettings:
    """Configurações do provedor de pagamento.

    Attributes:
        secret_key: Chave secreta da API
        webhook_secret: Secret compartilhado para assinatura de webhooks
        api_version: Versão fixa da API
        success_url: URL de retorno após pagamento
        cancel_url: URL de retorno ao cancelar
        default_currency: Tag de moeda gravada no metadata da sessão
        enforce_price_allowlist: Rejeita price IDs fora da allowlist
        allowed_price_ids: Price IDs aprovados para checkout
        webhook_max_body_bytes: Teto de bytes do corpo do webhook
    """

    secret_key: str = ""
    webhook_secret: str = ""
    api_version: str = STRIPE_API_VERSION
    success_url: str = ""
    cancel_url: str = ""
    default_currency: str = DEFAULT_CURRENCY
    enforce_price_allowlist: bool = False
    allowed_price_ids: frozenset[str] = frozenset()
    webhook_max_body_bytes: int = DEFAULT_WEBHOOK_MAX_BODY_BYTES

    @property
    def checkout_urls_valid(self) -> bool:
        """True se success_url e cancel_url são URLs absolutas."""
        return is_absolute_url(self.success_url) and is_absolute_url(self.cancel_url)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Stripe.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.secret_key:
            errors.append("STRIPE_SECRET_KEY não configurado")

        if not self.webhook_secret:
            errors.append("STRIPE_WEBHOOK_SECRET não configurado")

        if not self.checkout_urls_valid:
            errors.append("SUCCESS_URL e CANCEL_URL devem ser URLs absolutas")

        if self.enforce_price_allowlist and not self.allowed_price_ids:
            errors.append(
                "ENFORCE_STRIPE_PRICE_ALLOWLIST ativo com ALLOWED_STRIPE_PRICE_IDS vazio"
            )

        if self.webhook_max_body_bytes <= 0:
            errors.append("STRIPE_WEBHOOK_MAX_BODY_BYTES deve ser > 0")

        return errors


def _parse_enforce_flag(raw: str, environment: str) -> bool:
    """Flag explícita vence; sem flag, aplica apenas em produção."""
    value = raw.strip()
    if value:
        return value.lower() == "true"
    return parse_environment(environment) == "production"


def _load_from_env() -> StripeSettings:
    """Carrega StripeSettings a partir de variáveis de ambiente."""
    return StripeSettings(
        secret_key=os.getenv("STRIPE_SECRET_KEY", "").strip(),
        webhook_secret=os.getenv("STRIPE_WEBHOOK_SECRET", "").strip(),
        api_version=os.getenv("STRIPE_API_VERSION", STRIPE_API_VERSION),
        success_url=os.getenv("SUCCESS_URL", "").strip(),
        cancel_url=os.getenv("CANCEL_URL", "").strip(),
        default_currency=os.getenv("DEFAULT_CURRENCY", "").strip() or DEFAULT_CURRENCY,
        enforce_price_allowlist=_parse_enforce_flag(
            os.getenv("ENFORCE_STRIPE_PRICE_ALLOWLIST", ""),
            os.getenv("ENVIRONMENT", "development"),
        ),
        allowed_price_ids=frozenset(parse_csv(os.getenv("ALLOWED_STRIPE_PRICE_IDS", ""))),
        webhook_max_body_bytes=int(
            os.getenv("STRIPE_WEBHOOK_MAX_BODY_BYTES", str(DEFAULT_WEBHOOK_MAX_BODY_BYTES))
        ),
    )


@lru_cache(maxsize=1)
def get_stripe_settings() -> StripeSettings:
    """Retorna instância cacheada de StripeSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
