"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CaptchaFailedError,
    ClientValidationError,
    ForbiddenOriginError,
    GatewayError,
    InfrastructureError,
    InvalidBodyError,
    InvalidContentLengthError,
    PayloadTooLargeError,
    RateLimitedError,
    RedisConnectionError,
    ServerMisconfigurationError,
    SignatureInvalidError,
    UnsupportedMediaTypeError,
    UpstreamProviderError,
)

__all__ = [
    "CaptchaFailedError",
    "ClientValidationError",
    "ForbiddenOriginError",
    "GatewayError",
    "InfrastructureError",
    "InvalidBodyError",
    "InvalidContentLengthError",
    "PayloadTooLargeError",
    "RateLimitedError",
    "RedisConnectionError",
    "ServerMisconfigurationError",
    "SignatureInvalidError",
    "UnsupportedMediaTypeError",
    "UpstreamProviderError",
]
