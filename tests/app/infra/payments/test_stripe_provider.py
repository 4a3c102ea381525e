"""Testes do adapter Stripe (SDK mockado)."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
import stripe

from app.infra.payments import StripeCheckoutProvider
from utils.errors import UpstreamProviderError


@pytest.mark.asyncio
async def test_create_session_passes_key_version_and_idempotency(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured: dict = {}

    def _fake_create(**kwargs):
        captured.update(kwargs)
        return SimpleNamespace(id="cs_test_1", url="https://checkout.stripe.com/c/pay/cs_test_1")

    monkeypatch.setattr(stripe.checkout.Session, "create", _fake_create)
    provider = StripeCheckoutProvider(api_key="sk_test_123", api_version="2023-10-16")

    session = await provider.create_checkout_session(
        {"mode": "payment", "line_items": [{"price": "price_a", "quantity": 1}]},
        idempotency_key="cart-1",
    )

    assert session.id == "cs_test_1"
    assert captured["api_key"] == "sk_test_123"
    assert captured["stripe_version"] == "2023-10-16"
    assert captured["idempotency_key"] == "cart-1"
    assert captured["mode"] == "payment"


@pytest.mark.asyncio
async def test_stripe_error_becomes_upstream_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(**_kwargs):
        raise stripe.APIConnectionError("network down")

    monkeypatch.setattr(stripe.checkout.Session, "create", _fail)
    provider = StripeCheckoutProvider(api_key="sk_test_123")

    with pytest.raises(UpstreamProviderError) as exc_info:
        await provider.create_checkout_session({"mode": "payment"})

    assert exc_info.value.public_message == "Failed to create checkout session."


@pytest.mark.asyncio
async def test_list_line_items_maps_price_and_quantity(monkeypatch: pytest.MonkeyPatch) -> None:
    line_items = SimpleNamespace(
        data=[
            SimpleNamespace(quantity=2, price=SimpleNamespace(id="price_a")),
            SimpleNamespace(quantity=1, price=None),
        ]
    )
    monkeypatch.setattr(
        stripe.checkout.Session, "list_line_items", lambda session_id, **kwargs: line_items
    )
    provider = StripeCheckoutProvider(api_key="sk_test_123")

    items = await provider.list_line_items("cs_test_1")

    assert items == [
        {"quantity": 2, "price_id": "price_a"},
        {"quantity": 1, "price_id": None},
    ]


def test_requires_api_key() -> None:
    with pytest.raises(ValueError):
        StripeCheckoutProvider(api_key="")
