"""Modelos de domínio do checkout.

Construídos apenas pelos validadores da camada api; nunca a partir de
payload bruto do cliente.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_QUANTITY = 99
MAX_LINE_ITEMS = 50


class CheckoutItemRequest(BaseModel):
    """Uma linha do carrinho."""

    model_config = ConfigDict(frozen=True)

    price_id: str = Field(..., pattern=r"^price_[a-zA-Z0-9]+$")
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)


class ValidatedCheckoutPayload(BaseModel):
    """Corpo de checkout sanitizado e tipado."""

    model_config = ConfigDict(frozen=True)

    items: tuple[CheckoutItemRequest, ...] = Field(..., min_length=1, max_length=MAX_LINE_ITEMS)
    customer_email: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @property
    def price_ids(self) -> list[str]:
        return [item.price_id for item in self.items]


class CheckoutSession(BaseModel):
    """Sessão criada no provedor de pagamento."""

    model_config = ConfigDict(frozen=True)

    id: str
    url: str | None = None
