"""Leitura de corpo com teto de bytes.

O Content-Length declarado é checado antes de tocar no stream; depois o
corpo é lido em chunks com contador, abortando assim que o teto é
excedido. Memória limitada mesmo com header mentiroso.
"""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING, Any

from starlette.requests import ClientDisconnect

from utils.errors import (
    ClientValidationError,
    InvalidBodyError,
    InvalidContentLengthError,
    PayloadTooLargeError,
)

if TYPE_CHECKING:
    from starlette.requests import Request

logger = logging.getLogger(__name__)

# Maior inteiro representável sem perda em clientes JS (2**53 - 1)
MAX_SAFE_CONTENT_LENGTH = 9_007_199_254_740_991

_DIGITS_RE = re.compile(r"^\d+$")


def parse_content_length(header_value: str | None) -> int | None:
    """Interpreta o header Content-Length.

    Returns:
        Número de bytes declarado, ou None se o header não veio.

    Raises:
        InvalidContentLengthError: Valor não numérico, negativo ou grande demais.
    """
    if header_value is None:
        return None

    trimmed = header_value.strip()
    if not _DIGITS_RE.match(trimmed):
        raise InvalidContentLengthError()

    declared = int(trimmed)
    if declared > MAX_SAFE_CONTENT_LENGTH:
        raise InvalidContentLengthError()
    return declared


def check_declared_length(request: Request, max_bytes: int) -> None:
    """Rejeita pelo header antes de qualquer leitura.

    Raises:
        InvalidContentLengthError: Header malformado.
        PayloadTooLargeError: Tamanho declarado acima do teto.
    """
    declared = parse_content_length(request.headers.get("content-length"))
    if declared is not None and declared > max_bytes:
        raise PayloadTooLargeError()


async def read_body_with_limit(request: Request, max_bytes: int) -> bytes:
    """Lê o corpo bruto respeitando `max_bytes`.

    Returns:
        Bytes exatos recebidos (para assinatura ou parse).

    Raises:
        InvalidContentLengthError: Header malformado.
        PayloadTooLargeError: Corpo (declarado ou real) acima do teto.
        InvalidBodyError: Cliente desconectou no meio da leitura.
    """
    check_declared_length(request, max_bytes)

    chunks: list[bytes] = []
    total_bytes = 0
    stream = request.stream()
    try:
        async for chunk in stream:
            if not chunk:
                continue
            total_bytes += len(chunk)
            if total_bytes > max_bytes:
                raise PayloadTooLargeError()
            chunks.append(chunk)
    except ClientDisconnect as exc:
        logger.info("request_body_client_disconnected", extra={"bytes_read": total_bytes})
        raise InvalidBodyError() from exc
    finally:
        await stream.aclose()

    return b"".join(chunks)


def parse_json_body(raw_body: bytes) -> Any:
    """Decodifica o corpo como JSON (UTF-8).

    Raises:
        ClientValidationError: Corpo vazio, não UTF-8 ou JSON malformado.
    """
    try:
        return json.loads(raw_body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ClientValidationError("Invalid JSON request body.") from exc
