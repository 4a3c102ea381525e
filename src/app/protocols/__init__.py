"""Protocolos e contratos do core da aplicação."""

from .captcha import CaptchaVerification, CaptchaVerifierProtocol
from .email_sender import EmailAttachment, EmailSenderProtocol
from .payment_provider import PaymentProviderProtocol
from .rate_limit_store import RateLimitEntry, RateLimitStoreProtocol

__all__ = [
    "CaptchaVerification",
    "CaptchaVerifierProtocol",
    "EmailAttachment",
    "EmailSenderProtocol",
    "PaymentProviderProtocol",
    "RateLimitEntry",
    "RateLimitStoreProtocol",
]
