"""Testes do verificador Turnstile com httpx.MockTransport."""

from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from app.infra.captcha import TurnstileVerifier


def _verifier(handler) -> TurnstileVerifier:
    return TurnstileVerifier(
        secret_key="ts_secret",
        verify_url="https://turnstile.test/siteverify",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_success_sends_form_with_remote_ip() -> None:
    captured: dict = {}

    def _handler(request: httpx.Request) -> httpx.Response:
        captured.update(parse_qs(request.content.decode()))
        return httpx.Response(200, json={"success": True})

    result = await _verifier(_handler).verify("tok", "203.0.113.7")

    assert result.verified is True
    assert captured == {"secret": ["ts_secret"], "response": ["tok"], "remoteip": ["203.0.113.7"]}


@pytest.mark.asyncio
async def test_unknown_ip_is_not_sent() -> None:
    captured: dict = {}

    def _handler(request: httpx.Request) -> httpx.Response:
        captured.update(parse_qs(request.content.decode()))
        return httpx.Response(200, json={"success": True})

    await _verifier(_handler).verify("tok", "unknown")

    assert "remoteip" not in captured


@pytest.mark.asyncio
async def test_rejected_token_keeps_error_codes() -> None:
    verifier = _verifier(
        lambda request: httpx.Response(
            200, json={"success": False, "error-codes": ["invalid-input-response"]}
        )
    )

    result = await verifier.verify("tok", "1.2.3.4")

    assert result.verified is False
    assert result.error_codes == ("invalid-input-response",)


@pytest.mark.asyncio
async def test_truthy_non_boolean_success_is_not_verified() -> None:
    verifier = _verifier(lambda request: httpx.Response(200, json={"success": "true"}))

    assert (await verifier.verify("tok", "1.2.3.4")).verified is False


@pytest.mark.asyncio
async def test_http_error_status() -> None:
    verifier = _verifier(lambda request: httpx.Response(503, text="unavailable"))

    result = await verifier.verify("tok", "1.2.3.4")

    assert result.verified is False
    assert result.error_codes == ("http_503",)


@pytest.mark.asyncio
async def test_unparseable_response() -> None:
    verifier = _verifier(lambda request: httpx.Response(200, text="<html>"))

    result = await verifier.verify("tok", "1.2.3.4")

    assert result.error_codes == ("invalid_response",)


@pytest.mark.asyncio
async def test_network_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timeout", request=request)

    result = await _verifier(_handler).verify("tok", "1.2.3.4")

    assert result.error_codes == ("network_error",)
