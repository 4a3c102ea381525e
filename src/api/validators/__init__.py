"""Validadores de payload — cadeias tagueadas, primeiro erro vence.

Nenhum validador levanta exceção: a rota converte o erro em 400.
"""

from api.validators.checkout import PRICE_ID_RE, validate_checkout_payload, validate_price_id
from api.validators.custom_order import validate_custom_order_payload
from api.validators.design_image import (
    MAX_DESIGN_IMAGE_BYTES,
    decode_design_image,
    validate_design_image,
)
from api.validators.metadata import sanitize_metadata
from api.validators.result import MISSING, ValidationResult, chain, invalid, propagate, valid
from api.validators.sanitizer import EMAIL_RE, is_valid_email, sanitize_text

__all__ = [
    "EMAIL_RE",
    "MAX_DESIGN_IMAGE_BYTES",
    "MISSING",
    "PRICE_ID_RE",
    "ValidationResult",
    "chain",
    "decode_design_image",
    "invalid",
    "is_valid_email",
    "propagate",
    "sanitize_metadata",
    "sanitize_text",
    "valid",
    "validate_checkout_payload",
    "validate_custom_order_payload",
    "validate_design_image",
    "validate_price_id",
]
