"""Envio de email via Resend HTTP API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from config.logging import email_domain
from config.settings.email import RESEND_API_BASE_URL
from utils.errors import UpstreamProviderError

if TYPE_CHECKING:
    from app.protocols.email_sender import EmailAttachment

logger = logging.getLogger(__name__)


class ResendEmailSender:
    """Implementa EmailSenderProtocol.

    Args:
        api_key: Chave da API Resend
        from_address: Remetente ("Nome <email>")
        base_url: URL base da API
        timeout_seconds: Timeout da requisição
        transport: Transport httpx opcional (testes)
    """

    def __init__(
        self,
        api_key: str,
        from_address: str,
        base_url: str = RESEND_API_BASE_URL,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key é obrigatório")
        self._api_key = api_key
        self._from_address = from_address
        self._endpoint = f"{base_url.rstrip('/')}/emails"
        self._timeout = timeout_seconds
        self._transport = transport

    async def send(
        self,
        *,
        to: str,
        subject: str,
        text: str,
        attachments: tuple[EmailAttachment, ...] = (),
    ) -> str | None:
        """Envia email de texto; retorna o id do Resend.

        Raises:
            UpstreamProviderError: Falha de rede ou status >= 400.
        """
        payload: dict[str, Any] = {
            "from": self._from_address,
            "to": [to],
            "subject": subject,
            "text": text,
        }
        if attachments:
            payload["attachments"] = [
                {
                    "filename": attachment.filename,
                    "content": attachment.content_base64,
                    "content_type": attachment.content_type,
                }
                for attachment in attachments
            ]

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self._endpoint,
                    json=payload,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                    timeout=self._timeout,
                )
        except httpx.HTTPError as exc:
            logger.error("email_send_transport_error", extra={"error_type": type(exc).__name__})
            raise UpstreamProviderError("Failed to send email.") from exc

        if response.status_code >= 400:
            logger.error(
                "email_send_rejected",
                extra={"status_code": response.status_code, "to_domain": email_domain(to)},
            )
            raise UpstreamProviderError("Failed to send email.")

        try:
            body = response.json()
        except ValueError:
            return None
        return body.get("id") if isinstance(body, dict) else None
