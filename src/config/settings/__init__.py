"""Agregador de settings do gateway.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.captcha import (
    TURNSTILE_VERIFY_URL,
    CaptchaSettings,
    get_captcha_settings,
)
from config.settings.cors import CorsSettings, get_cors_settings
from config.settings.email import (
    RESEND_API_BASE_URL,
    EmailSettings,
    get_email_settings,
)
from config.settings.rate_limit import (
    RateLimitBackend,
    RateLimitSettings,
    get_rate_limit_settings,
)
from config.settings.stripe import (
    DEFAULT_CURRENCY,
    STRIPE_API_VERSION,
    StripeSettings,
    get_stripe_settings,
)

__all__ = [
    # Constants
    "DEFAULT_CURRENCY",
    "RESEND_API_BASE_URL",
    "STRIPE_API_VERSION",
    "TURNSTILE_VERIFY_URL",
    # Settings
    "BaseSettings",
    "CaptchaSettings",
    "CorsSettings",
    "EmailSettings",
    "Environment",
    "RateLimitBackend",
    "RateLimitSettings",
    "StripeSettings",
    "get_base_settings",
    "get_captcha_settings",
    "get_cors_settings",
    "get_email_settings",
    "get_rate_limit_settings",
    "get_stripe_settings",
]
