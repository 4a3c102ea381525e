"""Testes do envio do pedido personalizado."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from app.domain.custom_order import CustomOrderPayload
from app.use_cases.custom_order import (
    SUCCESS_MESSAGE,
    SubmitCustomOrderUseCase,
    build_order_email,
    design_attachment,
)
from utils.errors import ServerMisconfigurationError, UpstreamProviderError


def _order(**overrides) -> CustomOrderPayload:
    fields = {
        "name": "Ana Souza",
        "email": "ana@example.com",
        "product_type": "Hoodie",
        "colors": ("Navy", "White"),
    }
    fields.update(overrides)
    return CustomOrderPayload(**fields)


def test_email_body_lists_order_details() -> None:
    text = build_order_email(
        _order(orientation="Front"),
        "203.0.113.7",
        received_at=datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC),
    )

    assert "- Name: Ana Souza" in text
    assert "- Colors: Navy, White" in text
    assert "- Orientation: Front" in text
    assert "- Stitch Type: Not specified" in text
    assert "Received: 2025-01-02T03:04:05+00:00" in text
    assert "IP Address: 203.0.113.7" in text
    assert "Custom Design" not in text


def test_design_attachment() -> None:
    attachments = design_attachment("data:image/png;base64,aGVsbG8=")

    assert len(attachments) == 1
    assert attachments[0].filename == "design.png"
    assert attachments[0].content_base64 == "aGVsbG8="
    assert design_attachment(None) == ()


@pytest.mark.asyncio
async def test_execute_sends_email(fake_email_sender) -> None:
    use_case = SubmitCustomOrderUseCase(fake_email_sender, "orders@example.com")

    message = await use_case.execute(_order(), "1.2.3.4")

    assert message == SUCCESS_MESSAGE
    assert fake_email_sender.sent[0]["to"] == "orders@example.com"


@pytest.mark.asyncio
async def test_missing_resend_key() -> None:
    use_case = SubmitCustomOrderUseCase(None, "orders@example.com")

    with pytest.raises(ServerMisconfigurationError) as exc_info:
        await use_case.execute(_order(), "1.2.3.4")

    assert exc_info.value.public_message == "Server misconfigured: missing RESEND_API_KEY."


@pytest.mark.asyncio
async def test_send_failure_is_generic(fake_email_sender) -> None:
    fake_email_sender.error = RuntimeError("smtp exploded")
    use_case = SubmitCustomOrderUseCase(fake_email_sender, "orders@example.com")

    with pytest.raises(UpstreamProviderError) as exc_info:
        await use_case.execute(_order(), "1.2.3.4")

    assert exc_info.value.public_message == "Failed to process order. Please try again."
