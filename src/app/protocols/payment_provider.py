"""Protocolo do provedor de pagamento.

Evita dependência direta do SDK do Stripe nos casos de uso.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.checkout import CheckoutSession


class PaymentProviderProtocol(Protocol):
    """Contrato mínimo para criação de sessões de checkout."""

    async def create_checkout_session(
        self,
        params: dict[str, Any],
        idempotency_key: str | None = None,
    ) -> CheckoutSession: ...

    async def list_line_items(self, session_id: str) -> list[dict[str, Any]]: ...
