"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    get_base_settings,
    get_captcha_settings,
    get_cors_settings,
    get_email_settings,
    get_rate_limit_settings,
    get_stripe_settings,
)
from config.settings.stripe import DEFAULT_WEBHOOK_MAX_BODY_BYTES, StripeSettings

_GETTERS = (
    get_base_settings,
    get_captcha_settings,
    get_cors_settings,
    get_email_settings,
    get_rate_limit_settings,
    get_stripe_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    for getter in _GETTERS:
        getter.cache_clear()
    yield
    for getter in _GETTERS:
        getter.cache_clear()


def test_cors_parses_csv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGIN", "https://a.example, ,https://b.example")

    assert get_cors_settings().allowed_origins == ("https://a.example", "https://b.example")


def test_cors_empty_means_no_allowlist(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ALLOWED_ORIGIN", raising=False)

    assert get_cors_settings().enforced is False


def test_stripe_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DEFAULT_CURRENCY",
        "ENFORCE_STRIPE_PRICE_ALLOWLIST",
        "ENVIRONMENT",
        "STRIPE_WEBHOOK_MAX_BODY_BYTES",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_stripe_settings()

    assert settings.default_currency == "gbp"
    assert settings.enforce_price_allowlist is False
    assert settings.webhook_max_body_bytes == DEFAULT_WEBHOOK_MAX_BODY_BYTES


@pytest.mark.parametrize(
    ("flag", "environment", "expected"),
    [
        ("", "production", True),
        ("", "development", False),
        ("true", "development", True),
        ("TRUE", "development", True),
        ("false", "production", False),
        ("yes", "production", False),
    ],
)
def test_enforce_allowlist_flag(
    monkeypatch: pytest.MonkeyPatch, flag: str, environment: str, expected: bool
) -> None:
    monkeypatch.setenv("ENFORCE_STRIPE_PRICE_ALLOWLIST", flag)
    monkeypatch.setenv("ENVIRONMENT", environment)

    assert get_stripe_settings().enforce_price_allowlist is expected


def test_allowed_price_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_STRIPE_PRICE_IDS", "price_a, price_b,,")

    assert get_stripe_settings().allowed_price_ids == frozenset({"price_a", "price_b"})


def test_stripe_validate_reports_problems() -> None:
    errors = StripeSettings(enforce_price_allowlist=True).validate()

    assert "STRIPE_SECRET_KEY não configurado" in errors
    assert "SUCCESS_URL e CANCEL_URL devem ser URLs absolutas" in errors
    assert any("ALLOWED_STRIPE_PRICE_IDS" in error for error in errors)


def test_rate_limit_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RATE_LIMIT_BACKEND", "Redis")
    monkeypatch.setenv("CUSTOM_ORDER_RATE_LIMIT", "10")

    settings = get_rate_limit_settings()

    assert settings.backend == "redis"
    assert settings.custom_order_limit == 10
    assert settings.validate(redis_url="") == ["REDIS_URL obrigatório para RATE_LIMIT_BACKEND=redis"]


def test_captcha_disabled_without_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TURNSTILE_SECRET_KEY", raising=False)

    assert get_captcha_settings().enabled is False


def test_email_from_address_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORDER_EMAIL_FROM", "  ")
    monkeypatch.setenv("ORDER_EMAIL", " orders@example.com ")

    settings = get_email_settings()

    assert settings.order_email == "orders@example.com"
    assert settings.from_address.startswith("StitchWyse Orders")


def test_base_environment_aliases(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")

    assert get_base_settings().is_production is True
