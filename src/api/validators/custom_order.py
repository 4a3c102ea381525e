"""Validação do corpo de POST /custom-order.

A ordem das verificações define qual erro o cliente recebe: campos
obrigatórios, formato do email, tamanhos, cores, imagem e captcha.
"""

from __future__ import annotations

from typing import Any

from api.validators.design_image import validate_design_image
from api.validators.result import MISSING, ValidationResult, chain, invalid, propagate, valid
from api.validators.rules import is_string, length_between, not_empty, sanitized, trimmed
from api.validators.sanitizer import MAX_EMAIL_LENGTH, is_valid_email, sanitize_text
from app.domain.custom_order import MAX_COLORS, CustomOrderPayload

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MAX_PRODUCT_TYPE_LENGTH = 100
MAX_OPTION_LENGTH = 100
MAX_COLOR_LENGTH = 64
MAX_CAPTCHA_TOKEN_LENGTH = 2048

MISSING_FIELDS = "Missing required fields."
INVALID_EMAIL = "Invalid email format."
INVALID_LENGTH = "Invalid field length."
INVALID_COLORS = f"Invalid colors selection (1-{MAX_COLORS} colors required)."
INVALID_CAPTCHA_TOKEN = "Invalid captcha token."


def _required_text(value: Any) -> ValidationResult[str]:
    return chain(value, is_string(MISSING_FIELDS), trimmed, not_empty(MISSING_FIELDS))


def _validate_colors(raw: Any) -> ValidationResult[tuple[str, ...]]:
    if not isinstance(raw, list) or not 1 <= len(raw) <= MAX_COLORS:
        return invalid(INVALID_COLORS)

    colors: list[str] = []
    for entry in raw:
        color = chain(
            entry,
            is_string("Each color must be a string."),
            sanitized(MAX_COLOR_LENGTH),
            not_empty("Each color must be non-empty."),
        )
        if not color.ok:
            return propagate(color)
        colors.append(color.value)
    return valid(tuple(colors))


def _optional_option(raw: Any) -> str:
    if not isinstance(raw, str):
        return ""
    return sanitize_text(raw, MAX_OPTION_LENGTH)


def _validate_captcha_token(raw: Any) -> ValidationResult[str | None]:
    if raw is MISSING or raw is None:
        return valid(None)
    return chain(
        raw,
        is_string(INVALID_CAPTCHA_TOKEN),
        trimmed,
        length_between(1, MAX_CAPTCHA_TOKEN_LENGTH, INVALID_CAPTCHA_TOKEN),
    )


def validate_custom_order_payload(body: Any) -> ValidationResult[CustomOrderPayload]:
    """Valida e sanitiza o formulário de pedido personalizado."""
    if not isinstance(body, dict):
        return invalid("Body must be a JSON object.")

    name = _required_text(body.get("name"))
    email = _required_text(body.get("email"))
    product_type = _required_text(body.get("productType"))
    for field in (name, email, product_type):
        if not field.ok:
            return propagate(field)

    if not is_valid_email(email.value):
        return invalid(INVALID_EMAIL)

    if (
        not MIN_NAME_LENGTH <= len(name.value) <= MAX_NAME_LENGTH
        or len(email.value) > MAX_EMAIL_LENGTH
        or len(product_type.value) > MAX_PRODUCT_TYPE_LENGTH
    ):
        return invalid(INVALID_LENGTH)

    colors = _validate_colors(body.get("colors"))
    if not colors.ok:
        return propagate(colors)

    design_image = validate_design_image(body.get("designImage", MISSING))
    if not design_image.ok:
        return propagate(design_image)

    captcha_token = _validate_captcha_token(body.get("captchaToken", MISSING))
    if not captcha_token.ok:
        return propagate(captcha_token)

    return valid(
        CustomOrderPayload(
            name=sanitize_text(name.value, MAX_NAME_LENGTH),
            email=sanitize_text(email.value, MAX_EMAIL_LENGTH),
            product_type=sanitize_text(product_type.value, MAX_PRODUCT_TYPE_LENGTH),
            colors=colors.value,
            orientation=_optional_option(body.get("orientation")),
            stitch_type=_optional_option(body.get("stitchType")),
            design_image=design_image.value,
            captcha_token=captcha_token.value,
        )
    )
