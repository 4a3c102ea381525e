"""Protocolo de envio de email transacional."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class EmailAttachment:
    """Anexo em base64."""

    filename: str
    content_base64: str
    content_type: str


class EmailSenderProtocol(Protocol):
    """Contrato mínimo para envio de email."""

    async def send(
        self,
        *,
        to: str,
        subject: str,
        text: str,
        attachments: tuple[EmailAttachment, ...] = (),
    ) -> str | None: ...
