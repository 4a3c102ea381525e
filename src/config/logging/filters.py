"""Filters do handler raiz do gateway.

`CorrelationIdFilter` carimba service e correlation_id; `PiiRedactionFilter`
garante que campos `extra` sensíveis nunca saiam em claro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Campos `extra` que carregam email: reduzidos ao domínio
EMAIL_FIELDS = frozenset({"email", "customer_email", "to", "order_email"})
# Campos `extra` que carregam segredo ou token: mascarados
SECRET_FIELDS = frozenset(
    {"captcha_token", "signature", "stripe_signature", "authorization", "api_key", "secret"}
)
REDACTED = "[redacted]"


def email_domain(address: str | None) -> str | None:
    """Reduz um email ao domínio para logar sem PII."""
    if not address or "@" not in address:
        return None
    return address.rsplit("@", 1)[1] or None


class CorrelationIdFilter(logging.Filter):
    """Carimba `service` e `correlation_id` da requisição corrente.

    Um correlation_id passado via `extra` vence o do ContextVar.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter else ""
        record.service = self._service_name
        return True


class PiiRedactionFilter(logging.Filter):
    """Reduz emails ao domínio e mascara tokens em campos `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in EMAIL_FIELDS:
            value = record.__dict__.get(field)
            if isinstance(value, str):
                record.__dict__[field] = email_domain(value)
        for field in SECRET_FIELDS:
            if record.__dict__.get(field):
                record.__dict__[field] = REDACTED
        return True
