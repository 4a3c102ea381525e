"""Orquestração do checkout.

Recebe um payload já validado e aprovado pela allowlist de preços,
monta os parâmetros da sessão e delega a criação ao provedor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from config.settings.stripe import DEFAULT_CURRENCY, is_absolute_url
from utils.errors import ServerMisconfigurationError, UpstreamProviderError

if TYPE_CHECKING:
    from app.domain.checkout import CheckoutSession, ValidatedCheckoutPayload
    from app.protocols.payment_provider import PaymentProviderProtocol

logger = logging.getLogger(__name__)

MAX_IDEMPOTENCY_KEY_LENGTH = 255
MAX_METADATA_VALUE_LENGTH = 500


def normalize_idempotency_key(raw: str | None) -> str | None:
    """Limpa o header Idempotency-Key; vazio vira None."""
    if raw is None:
        return None
    trimmed = raw.strip()
    return trimmed[:MAX_IDEMPOTENCY_KEY_LENGTH] if trimmed else None


class CheckoutOrchestrator:
    """Cria sessões de checkout no provedor.

    Args:
        provider: Provedor de pagamento (None = credenciais ausentes)
        success_url: URL absoluta de retorno após pagamento
        cancel_url: URL absoluta de retorno ao cancelar
        default_currency: Tag de moeda gravada no metadata
    """

    def __init__(
        self,
        provider: PaymentProviderProtocol | None,
        success_url: str,
        cancel_url: str,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._provider = provider
        self._success_url = success_url
        self._cancel_url = cancel_url
        self._default_currency = (default_currency.strip() or DEFAULT_CURRENCY)[
            :MAX_METADATA_VALUE_LENGTH
        ]

    @property
    def is_configured(self) -> bool:
        return (
            self._provider is not None
            and is_absolute_url(self._success_url)
            and is_absolute_url(self._cancel_url)
        )

    def ensure_configured(self) -> PaymentProviderProtocol:
        """Falha antes de ler o corpo se a configuração obrigatória faltar.

        Returns:
            O provedor configurado.

        Raises:
            ServerMisconfigurationError: URLs inválidas ou provedor ausente.
        """
        if not (is_absolute_url(self._success_url) and is_absolute_url(self._cancel_url)):
            raise ServerMisconfigurationError(
                "Server misconfigured: SUCCESS_URL and CANCEL_URL must be valid absolute URLs."
            )
        if self._provider is None:
            raise ServerMisconfigurationError("Server misconfigured: missing STRIPE_SECRET_KEY.")
        return self._provider

    def build_session_params(self, payload: ValidatedCheckoutPayload) -> dict[str, Any]:
        """Monta os parâmetros de criação da sessão."""
        metadata = dict(payload.metadata)
        metadata["default_currency"] = self._default_currency

        params: dict[str, Any] = {
            "mode": "payment",
            "line_items": [
                {"price": item.price_id, "quantity": item.quantity} for item in payload.items
            ],
            "success_url": self._success_url,
            "cancel_url": self._cancel_url,
            "allow_promotion_codes": True,
            "billing_address_collection": "auto",
            "metadata": metadata,
        }
        if payload.customer_email:
            params["customer_email"] = payload.customer_email
        return params

    async def create_session(
        self,
        payload: ValidatedCheckoutPayload,
        idempotency_key: str | None = None,
    ) -> CheckoutSession:
        """Cria a sessão; uma única tentativa.

        Raises:
            ServerMisconfigurationError: Configuração ausente.
            UpstreamProviderError: Falha do provedor ou sessão sem URL.
        """
        provider = self.ensure_configured()

        params = self.build_session_params(payload)
        try:
            session = await provider.create_checkout_session(
                params, idempotency_key=idempotency_key
            )
        except Exception as exc:
            logger.error(
                "checkout_session_create_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise UpstreamProviderError("Failed to create checkout session.") from exc

        logger.info(
            "checkout_session_created",
            extra={
                "session_id": session.id,
                "has_idempotency_key": idempotency_key is not None,
                "line_items": len(payload.items),
            },
        )

        if not session.url:
            raise UpstreamProviderError("Stripe session was created without a redirect URL.")

        return session
