"""Validação do corpo de POST /checkout."""

from __future__ import annotations

import re
from typing import Any

from api.validators.metadata import sanitize_metadata
from api.validators.result import MISSING, ValidationResult, chain, invalid, propagate, valid
from api.validators.rules import (
    integer_between,
    is_string,
    length_between,
    matches,
    not_empty,
    trimmed,
)
from api.validators.sanitizer import EMAIL_RE, MAX_EMAIL_LENGTH
from app.domain.checkout import (
    MAX_LINE_ITEMS,
    MAX_QUANTITY,
    CheckoutItemRequest,
    ValidatedCheckoutPayload,
)

PRICE_ID_RE = re.compile(r"^price_[a-zA-Z0-9]+$")


def validate_price_id(value: Any, prefix: str = "priceId") -> ValidationResult[str]:
    return chain(
        value,
        is_string(f"{prefix} must be a string."),
        trimmed,
        not_empty(f"{prefix} must be a non-empty string."),
        matches(PRICE_ID_RE, f"{prefix} must look like a Stripe Price ID (price_...)."),
    )


def _validate_item(index: int, raw: Any) -> ValidationResult[CheckoutItemRequest]:
    if not isinstance(raw, dict):
        return invalid(f"items[{index}] must be an object.")

    price_id = validate_price_id(raw.get("priceId"), prefix=f"items[{index}].priceId")
    if not price_id.ok:
        return propagate(price_id)

    quantity = integer_between(
        1,
        MAX_QUANTITY,
        f"items[{index}].quantity must be an integer between 1 and {MAX_QUANTITY}.",
    )(raw.get("quantity"))
    if not quantity.ok:
        return propagate(quantity)

    return valid(CheckoutItemRequest(price_id=price_id.value, quantity=quantity.value))


def _validate_items(raw: Any) -> ValidationResult[tuple[CheckoutItemRequest, ...]]:
    if not isinstance(raw, list) or not raw:
        return invalid("items must be a non-empty array.")
    if len(raw) > MAX_LINE_ITEMS:
        return invalid(f"items must not exceed {MAX_LINE_ITEMS} line items.")

    items: list[CheckoutItemRequest] = []
    for index, entry in enumerate(raw):
        item = _validate_item(index, entry)
        if not item.ok:
            return propagate(item)
        items.append(item.value)
    return valid(tuple(items))


def _validate_customer_email(raw: Any) -> ValidationResult[str | None]:
    if raw is MISSING or raw is None:
        return valid(None)
    if not isinstance(raw, str):
        return invalid("customerEmail must be a string when provided.")

    email = raw.strip()
    if not email:
        return valid(None)
    return chain(
        email,
        length_between(1, MAX_EMAIL_LENGTH, f"customerEmail must not exceed {MAX_EMAIL_LENGTH} characters."),
        matches(EMAIL_RE, "customerEmail must be a valid email address."),
    )


def _validate_metadata(raw: Any) -> ValidationResult[dict[str, str]]:
    if raw is MISSING or raw is None:
        return valid(sanitize_metadata(None))
    if not isinstance(raw, dict):
        return invalid("metadata must be an object when provided.")
    return valid(sanitize_metadata(raw))


def validate_checkout_payload(body: Any) -> ValidationResult[ValidatedCheckoutPayload]:
    """Valida o carrinho inteiro; devolve o primeiro erro encontrado."""
    if not isinstance(body, dict):
        return invalid("Body must be a JSON object.")

    items = _validate_items(body.get("items", MISSING))
    if not items.ok:
        return propagate(items)

    customer_email = _validate_customer_email(body.get("customerEmail", MISSING))
    if not customer_email.ok:
        return propagate(customer_email)

    metadata = _validate_metadata(body.get("metadata", MISSING))
    if not metadata.ok:
        return propagate(metadata)

    return valid(
        ValidatedCheckoutPayload(
            items=items.value,
            customer_email=customer_email.value,
            metadata=metadata.value,
        )
    )
