"""Envio do pedido personalizado por email."""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.protocols.email_sender import EmailAttachment
from config.logging import email_domain
from utils.errors import ServerMisconfigurationError, UpstreamProviderError

if TYPE_CHECKING:
    from app.domain.custom_order import CustomOrderPayload
    from app.protocols.email_sender import EmailSenderProtocol

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Order received! We'll contact you within 24 hours."

_DATA_URI_RE = re.compile(r"^data:(image/(png|jpeg));base64,(.+)$")


def build_order_email(
    payload: CustomOrderPayload,
    client_ip: str,
    received_at: datetime | None = None,
) -> str:
    """Monta o corpo em texto do email de pedido."""
    timestamp = (received_at or datetime.now(UTC)).isoformat()
    lines = [
        "New Custom Order Request",
        "",
        "Customer Details:",
        f"- Name: {payload.name}",
        f"- Email: {payload.email}",
        "",
        "Product Configuration:",
        f"- Product Type: {payload.product_type}",
        f"- Colors: {', '.join(payload.colors)}",
        f"- Orientation: {payload.orientation or 'Not specified'}",
        f"- Stitch Type: {payload.stitch_type or 'Not specified'}",
    ]
    if payload.design_image:
        lines.append("- Custom Design: Attached")
    lines += ["", "---", f"Received: {timestamp}", f"IP Address: {client_ip}"]
    return "\n".join(lines)


def design_attachment(design_image: str | None) -> tuple[EmailAttachment, ...]:
    """Converte o data URI validado em anexo."""
    if not design_image:
        return ()
    match = _DATA_URI_RE.match(design_image)
    if match is None:
        return ()
    content_type, subtype, encoded = match.groups()
    extension = "jpg" if subtype == "jpeg" else subtype
    return (
        EmailAttachment(
            filename=f"design.{extension}",
            content_base64=encoded,
            content_type=content_type,
        ),
    )


class SubmitCustomOrderUseCase:
    """Entrega o pedido para o email da loja.

    Args:
        email_sender: Sender configurado (None = RESEND_API_KEY ausente)
        order_email: Destinatário (vazio = ORDER_EMAIL ausente)
    """

    def __init__(self, email_sender: EmailSenderProtocol | None, order_email: str) -> None:
        self._email_sender = email_sender
        self._order_email = order_email.strip()

    async def execute(self, payload: CustomOrderPayload, client_ip: str) -> str:
        """Envia o pedido e retorna a mensagem de sucesso.

        Raises:
            ServerMisconfigurationError: Destinatário ou chave de envio ausente.
            UpstreamProviderError: Falha do provedor de email.
        """
        if not self._order_email:
            raise ServerMisconfigurationError("Server misconfigured: missing ORDER_EMAIL.")

        if self._email_sender is None:
            logger.warning(
                "custom_order_email_skipped",
                extra={"reason": "missing_resend_api_key"},
            )
            raise ServerMisconfigurationError("Server misconfigured: missing RESEND_API_KEY.")

        try:
            await self._email_sender.send(
                to=self._order_email,
                subject=f"New Custom Order - {payload.product_type}",
                text=build_order_email(payload, client_ip),
                attachments=design_attachment(payload.design_image),
            )
        except Exception as exc:
            logger.error(
                "custom_order_request_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise UpstreamProviderError("Failed to process order. Please try again.") from exc

        logger.info(
            "custom_order_email_sent",
            extra={"to_domain": email_domain(self._order_email)},
        )
        return SUCCESS_MESSAGE
