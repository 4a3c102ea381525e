"""Adapter do Stripe para sessões de checkout.

O handle é imutável: chave e versão da API são passadas por chamada,
sem mutar o estado global do módulo `stripe`. Chamadas do SDK são
síncronas e rodam em thread para não bloquear o event loop.

Sem retry local: o SDK já aplica retries de rede configurados em
`max_network_retries`; aqui qualquer falha é terminal.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import stripe

from app.domain.checkout import CheckoutSession
from config.settings.stripe import STRIPE_API_VERSION
from utils.errors import UpstreamProviderError

logger = logging.getLogger(__name__)

LINE_ITEMS_PAGE_LIMIT = 100


class StripeCheckoutProvider:
    """Implementa PaymentProviderProtocol sobre o SDK oficial.

    Args:
        api_key: Chave secreta do Stripe
        api_version: Versão fixa da API
    """

    def __init__(self, api_key: str, api_version: str = STRIPE_API_VERSION) -> None:
        if not api_key:
            raise ValueError("api_key é obrigatório")
        self._api_key = api_key
        self._api_version = api_version

    @property
    def api_version(self) -> str:
        return self._api_version

    def _request_options(self) -> dict[str, Any]:
        return {"api_key": self._api_key, "stripe_version": self._api_version}

    async def create_checkout_session(
        self,
        params: dict[str, Any],
        idempotency_key: str | None = None,
    ) -> CheckoutSession:
        """Cria sessão de checkout (modo payment).

        Args:
            params: Parâmetros da sessão (line_items, urls, metadata...)
            idempotency_key: Chave do cliente; retries com a mesma chave
                retornam a mesma sessão no Stripe.

        Raises:
            UpstreamProviderError: Falha de API ou rede.
        """

        def _create() -> stripe.checkout.Session:
            return stripe.checkout.Session.create(
                idempotency_key=idempotency_key,
                **self._request_options(),
                **params,
            )

        try:
            session = await asyncio.to_thread(_create)
        except stripe.StripeError as exc:
            logger.error(
                "stripe_checkout_session_failed",
                extra={
                    "error_type": type(exc).__name__,
                    "stripe_code": getattr(exc, "code", None),
                    "http_status": getattr(exc, "http_status", None),
                },
            )
            raise UpstreamProviderError("Failed to create checkout session.") from exc

        return CheckoutSession(id=session.id, url=session.url)

    async def list_line_items(self, session_id: str) -> list[dict[str, Any]]:
        """Lista itens de uma sessão concluída (price_id + quantity).

        Raises:
            UpstreamProviderError: Falha de API ou rede.
        """

        def _list() -> Any:
            return stripe.checkout.Session.list_line_items(
                session_id,
                limit=LINE_ITEMS_PAGE_LIMIT,
                **self._request_options(),
            )

        try:
            line_items = await asyncio.to_thread(_list)
        except stripe.StripeError as exc:
            raise UpstreamProviderError("Failed to list line items.") from exc

        items: list[dict[str, Any]] = []
        for item in line_items.data:
            price = getattr(item, "price", None)
            items.append(
                {
                    "quantity": getattr(item, "quantity", None),
                    "price_id": getattr(price, "id", None) if price else None,
                }
            )
        return items
