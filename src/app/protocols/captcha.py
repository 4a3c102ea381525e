"""Protocolo de verificação de captcha."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class CaptchaVerification:
    """Veredito do verificador externo.

    Attributes:
        verified: True apenas quando o verificador confirmou o token
        error_codes: Códigos de erro (do verificador ou locais)
    """

    verified: bool
    error_codes: tuple[str, ...] = field(default_factory=tuple)


class CaptchaVerifierProtocol(Protocol):
    """Contrato mínimo para verificação de token de captcha."""

    async def verify(self, token: str, client_ip: str) -> CaptchaVerification: ...
