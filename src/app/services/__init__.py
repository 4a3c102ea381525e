"""Serviços de aplicação (rate limiting, allowlist de preços)."""

from app.services.price_allowlist import (
    PriceAllowlistConfig,
    PriceAllowlistResult,
    classify,
    enforce_price_allowlist,
)
from app.services.rate_limiter import RateLimitConfig, RateLimiter, RateLimitResult

__all__ = [
    "PriceAllowlistConfig",
    "PriceAllowlistResult",
    "RateLimitConfig",
    "RateLimitResult",
    "RateLimiter",
    "classify",
    "enforce_price_allowlist",
]
