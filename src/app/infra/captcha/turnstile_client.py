"""Verificação de token Cloudflare Turnstile.

Fail closed: erro de rede, status HTTP inesperado ou resposta ilegível
viram `verified=False` com código de erro próprio, nunca aprovação.
"""

from __future__ import annotations

import logging

import httpx

from app.protocols.captcha import CaptchaVerification
from config.settings.captcha import TURNSTILE_VERIFY_URL

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT_IP = "unknown"


class TurnstileVerifier:
    """Implementa CaptchaVerifierProtocol.

    Args:
        secret_key: Secret do Turnstile
        verify_url: Endpoint siteverify
        timeout_seconds: Timeout da chamada
        transport: Transport httpx opcional (testes)
    """

    def __init__(
        self,
        secret_key: str,
        verify_url: str = TURNSTILE_VERIFY_URL,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key é obrigatório")
        self._secret_key = secret_key
        self._verify_url = verify_url
        self._timeout = timeout_seconds
        self._transport = transport

    async def verify(self, token: str, client_ip: str) -> CaptchaVerification:
        form = {"secret": self._secret_key, "response": token}
        if client_ip and client_ip != UNKNOWN_CLIENT_IP:
            form["remoteip"] = client_ip

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self._verify_url, data=form, timeout=self._timeout)
        except httpx.HTTPError as exc:
            logger.warning("captcha_verify_network_error", extra={"error_type": type(exc).__name__})
            return CaptchaVerification(verified=False, error_codes=("network_error",))

        if not response.is_success:
            return CaptchaVerification(
                verified=False, error_codes=(f"http_{response.status_code}",)
            )

        try:
            payload = response.json()
        except ValueError:
            return CaptchaVerification(verified=False, error_codes=("invalid_response",))

        if not isinstance(payload, dict):
            return CaptchaVerification(verified=False, error_codes=("invalid_response",))

        raw_codes = payload.get("error-codes")
        error_codes = (
            tuple(code for code in raw_codes if isinstance(code, str))
            if isinstance(raw_codes, list)
            else ()
        )
        return CaptchaVerification(verified=payload.get("success") is True, error_codes=error_codes)
