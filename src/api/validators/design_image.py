"""Validação do data URI da imagem de design."""

from __future__ import annotations

import base64
import binascii
import re
from typing import Any

from api.validators.result import MISSING, ValidationResult, invalid, valid

DESIGN_IMAGE_RE = re.compile(r"^data:(image/png|image/jpeg);base64,([A-Za-z0-9+/=]+)$")
MAX_DESIGN_IMAGE_BYTES = 2 * 1024 * 1024
INVALID_DESIGN_IMAGE = "Invalid design image payload."


def decode_design_image(data_uri: str) -> tuple[str, bytes] | None:
    """Devolve (mime, bytes) ou None se o data URI for inválido."""
    match = DESIGN_IMAGE_RE.fullmatch(data_uri)
    if match is None:
        return None
    try:
        decoded = base64.b64decode(match.group(2), validate=True)
    except (binascii.Error, ValueError):
        return None
    return match.group(1), decoded


def validate_design_image(value: Any) -> ValidationResult[str | None]:
    """Campo opcional: ausente, null ou vazio → None."""
    if value is MISSING or value is None:
        return valid(None)
    if not isinstance(value, str):
        return invalid(INVALID_DESIGN_IMAGE)

    data_uri = value.strip()
    if not data_uri:
        return valid(None)

    decoded = decode_design_image(data_uri)
    if decoded is None:
        return invalid(INVALID_DESIGN_IMAGE)
    _, image_bytes = decoded
    if not 0 < len(image_bytes) <= MAX_DESIGN_IMAGE_BYTES:
        return invalid(INVALID_DESIGN_IMAGE)
    return valid(data_uri)
