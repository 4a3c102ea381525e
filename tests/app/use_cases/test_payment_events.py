"""Testes do roteamento de eventos de pagamento."""

from __future__ import annotations

import logging

import pytest

from app.domain.webhook import WebhookEnvelope
from app.use_cases.payment_events import PaymentEventRouter, extract_customer_id


def _envelope(event_type: str, obj: dict) -> WebhookEnvelope:
    return WebhookEnvelope(
        event_type=event_type,
        event_id="evt_1",
        payload={"id": "evt_1", "type": event_type, "data": {"object": obj}},
    )


def test_extract_customer_id() -> None:
    assert extract_customer_id("cus_1") == "cus_1"
    assert extract_customer_id({"id": "cus_2"}) == "cus_2"
    assert extract_customer_id(None) is None
    assert extract_customer_id(42) is None


@pytest.mark.asyncio
async def test_checkout_completed_logs_line_items(
    fake_provider, caplog: pytest.LogCaptureFixture
) -> None:
    router = PaymentEventRouter(fake_provider)

    with caplog.at_level(logging.INFO):
        outcome = await router.route(
            _envelope("checkout.session.completed", {"id": "cs_1", "customer": "cus_1"})
        )

    assert outcome == "handled"
    record = next(r for r in caplog.records if r.getMessage() == "checkout.session.completed")
    assert record.line_items == [{"quantity": 1, "price_id": "price_abc"}]
    assert record.customer_id == "cus_1"


@pytest.mark.asyncio
async def test_line_item_failure_is_tolerated(
    fake_provider, caplog: pytest.LogCaptureFixture
) -> None:
    fake_provider.error = RuntimeError("stripe down")
    router = PaymentEventRouter(fake_provider)

    with caplog.at_level(logging.INFO):
        outcome = await router.route(_envelope("checkout.session.completed", {"id": "cs_1"}))

    assert outcome == "handled"
    assert "webhook_list_line_items_failed" in caplog.messages


@pytest.mark.asyncio
async def test_payment_intent_succeeded() -> None:
    router = PaymentEventRouter()

    outcome = await router.route(_envelope("payment_intent.succeeded", {"id": "pi_1"}))

    assert outcome == "handled"


@pytest.mark.asyncio
async def test_other_events_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        outcome = await PaymentEventRouter().route(_envelope("invoice.paid", {}))

    assert outcome == "ignored"
    assert "webhook_unhandled_event" in caplog.messages
