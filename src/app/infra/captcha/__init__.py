"""Adapters de verificação de captcha."""

from app.infra.captcha.turnstile_client import TurnstileVerifier

__all__ = ["TurnstileVerifier"]
