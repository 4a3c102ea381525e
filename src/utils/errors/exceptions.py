"""Taxonomia de erros do gateway.

Cada erro carrega o status HTTP e a mensagem pública devolvida ao cliente.
Detalhes internos ficam apenas nos logs.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base para erros que encerram a requisição com resposta JSON."""

    status_code: int = 500
    public_message: str = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)
        self.public_message = message or self.public_message


class ClientValidationError(GatewayError):
    """Payload do cliente inválido."""

    status_code = 400
    public_message = "Invalid request payload."


class InvalidContentLengthError(ClientValidationError):
    """Header Content-Length malformado."""

    public_message = "Invalid Content-Length header."


class InvalidBodyError(ClientValidationError):
    """Falha ao ler o corpo (desconexão ou stream corrompido)."""

    public_message = "Invalid request body."


class ForbiddenOriginError(GatewayError):
    """Origem do browser fora da allowlist."""

    status_code = 403
    public_message = "Forbidden origin."


class PayloadTooLargeError(GatewayError):
    """Corpo excede o teto de bytes do endpoint."""

    status_code = 413
    public_message = "Payload too large."


class UnsupportedMediaTypeError(GatewayError):
    """Content-Type diferente de application/json."""

    status_code = 415
    public_message = "Unsupported content type. Use application/json."


class RateLimitedError(GatewayError):
    """Identificador excedeu o limite da janela atual."""

    status_code = 429
    public_message = "Too many requests. Please try again later."

    def __init__(self, reset_at_ms: int, message: str | None = None) -> None:
        super().__init__(message)
        self.reset_at_ms = reset_at_ms


class CaptchaFailedError(GatewayError):
    """Token de captcha rejeitado pelo verificador."""

    status_code = 403
    public_message = "Captcha verification failed."


class SignatureInvalidError(GatewayError):
    """Base para falhas de autenticação do webhook."""

    status_code = 400
    public_message = "Invalid webhook signature."


class ServerMisconfigurationError(GatewayError):
    """Configuração obrigatória ausente ou inválida."""

    status_code = 500
    public_message = "Server misconfigured."


class UpstreamProviderError(GatewayError):
    """Falha terminal de colaborador externo (Stripe, email, captcha)."""

    status_code = 500
    public_message = "Upstream provider failure."


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""
