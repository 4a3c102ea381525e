"""Adapters de envio de email."""

from app.infra.email.resend_sender import ResendEmailSender

__all__ = ["ResendEmailSender"]
