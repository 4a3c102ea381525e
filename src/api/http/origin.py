"""Allowlist de origens do browser e headers CORS.

Decisão pura: sem allowlist tudo passa; com allowlist só origens com
match exato, e requisição sem header Origin é negada.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Stripe-Signature, Idempotency-Key"
MAX_AGE_SECONDS = 60 * 60


def is_origin_allowed(origin: str | None, allowed_origins: Sequence[str]) -> bool:
    """Decide se a origem declarada pode chamar endpoints de browser."""
    if not allowed_origins:
        return True
    if not origin:
        return False
    return origin in allowed_origins


def resolve_allow_origin(origin: str | None, allowed_origins: Sequence[str]) -> str:
    """Valor de Access-Control-Allow-Origin para a resposta.

    Reflete a origem aceita; senão a primeira da allowlist; sem allowlist, "*".
    """
    if not allowed_origins:
        return "*"
    if origin and origin in allowed_origins:
        return origin
    return allowed_origins[0]


def cors_headers(origin: str | None, allowed_origins: Sequence[str]) -> dict[str, str]:
    """Headers CORS derivados da política de origens."""
    headers = {
        "Access-Control-Allow-Origin": resolve_allow_origin(origin, allowed_origins),
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Max-Age": str(MAX_AGE_SECONDS),
    }
    if allowed_origins:
        # A resposta varia por origem quando há allowlist (cache de browser/CDN)
        headers["Vary"] = "Origin"
    return headers
