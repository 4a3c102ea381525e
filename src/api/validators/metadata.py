"""Sanitização de metadata enviada ao provedor de pagamento."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from api.validators.sanitizer import sanitize_identifier

if TYPE_CHECKING:
    from collections.abc import Mapping

MAX_METADATA_KEY_LENGTH = 40
MAX_METADATA_VALUE_LENGTH = 500
# Stripe aceita 50 chaves; uma fica reservada para `source`.
MAX_CLIENT_METADATA_ENTRIES = 49
RESERVED_SOURCE_KEY = "source"
SOURCE_VALUE = "framer"


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def sanitize_metadata(raw: Mapping[str, Any] | None) -> dict[str, str]:
    """Normaliza chaves/valores e força `source=framer`.

    Entradas nulas e chaves vazias após normalização são descartadas.
    """
    sanitized: dict[str, str] = {}
    for key, value in (raw or {}).items():
        if len(sanitized) >= MAX_CLIENT_METADATA_ENTRIES:
            break
        safe_key = sanitize_identifier(str(key), MAX_METADATA_KEY_LENGTH)
        if not safe_key or safe_key == RESERVED_SOURCE_KEY or value is None:
            continue
        sanitized[safe_key] = _stringify(value)[:MAX_METADATA_VALUE_LENGTH]

    sanitized[RESERVED_SOURCE_KEY] = SOURCE_VALUE
    return sanitized
