"""Configuração do pytest para o checkout-gateway.

Fixtures compartilhadas: construção de Request Starlette à mão e
dependências do gateway com colaboradores falsos.
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from starlette.requests import Request  # noqa: E402

from app.bootstrap.dependencies import GatewayDependencies  # noqa: E402
from app.domain.checkout import CheckoutSession  # noqa: E402
from app.infra.stores import MemoryRateLimitStore  # noqa: E402
from app.protocols.captcha import CaptchaVerification  # noqa: E402
from app.services.price_allowlist import PriceAllowlistConfig  # noqa: E402
from app.services.rate_limiter import RateLimitConfig, RateLimiter  # noqa: E402
from app.use_cases.checkout import CheckoutOrchestrator  # noqa: E402
from app.use_cases.custom_order import SubmitCustomOrderUseCase  # noqa: E402
from app.use_cases.payment_events import PaymentEventRouter  # noqa: E402

ALLOWED_ORIGIN = "https://shop.example.com"
WEBHOOK_SECRET = "whsec_test_secret"


class FakePaymentProvider:
    """Provedor em memória que registra as chamadas."""

    def __init__(self, session: CheckoutSession | None = None, error: Exception | None = None):
        self.session = session or CheckoutSession(
            id="cs_test_123", url="https://checkout.stripe.com/c/pay/cs_test_123"
        )
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.line_items: list[dict[str, Any]] = [{"quantity": 1, "price_id": "price_abc"}]
        self.line_item_requests: list[str] = []

    async def create_checkout_session(
        self, params: dict[str, Any], idempotency_key: str | None = None
    ) -> CheckoutSession:
        self.calls.append({"params": params, "idempotency_key": idempotency_key})
        if self.error is not None:
            raise self.error
        return self.session

    async def list_line_items(self, session_id: str) -> list[dict[str, Any]]:
        self.line_item_requests.append(session_id)
        if self.error is not None:
            raise self.error
        return self.line_items


class FakeEmailSender:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.sent: list[dict[str, Any]] = []

    async def send(self, *, to: str, subject: str, text: str, attachments: tuple = ()) -> str:
        if self.error is not None:
            raise self.error
        self.sent.append({"to": to, "subject": subject, "text": text, "attachments": attachments})
        return "email_123"


class FakeCaptchaVerifier:
    def __init__(self, verified: bool = True) -> None:
        self.verified = verified
        self.calls: list[tuple[str, str]] = []

    async def verify(self, token: str, client_ip: str) -> CaptchaVerification:
        self.calls.append((token, client_ip))
        codes = () if self.verified else ("invalid-input-response",)
        return CaptchaVerification(verified=self.verified, error_codes=codes)


def make_request(
    *,
    method: str = "POST",
    path: str = "/",
    body: bytes = b"",
    chunks: list[bytes] | None = None,
    headers: dict[str, str] | None = None,
    dependencies: GatewayDependencies | None = None,
    disconnect_after: int | None = None,
) -> Request:
    """Request Starlette com corpo entregue em chunks.

    `disconnect_after` envia http.disconnect depois de N chunks.
    O atributo `receive_calls` conta quantas vezes o stream foi lido.
    """
    header_items = dict(headers or {})
    raw_headers = [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in header_items.items()]
    parts = list(chunks) if chunks is not None else [body]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "https",
        "server": ("gateway.test", 443),
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": raw_headers,
        "app": SimpleNamespace(state=SimpleNamespace(dependencies=dependencies)),
    }
    state = {"index": 0, "calls": 0}

    async def _receive() -> dict[str, object]:
        state["calls"] += 1
        index = state["index"]
        if disconnect_after is not None and index >= disconnect_after:
            return {"type": "http.disconnect"}
        if index >= len(parts):
            return {"type": "http.request", "body": b"", "more_body": False}
        state["index"] = index + 1
        return {
            "type": "http.request",
            "body": parts[index],
            "more_body": index + 1 < len(parts),
        }

    request = Request(scope, _receive)
    request.receive_calls = state  # type: ignore[attr-defined]
    return request


@pytest.fixture
def request_factory():
    return make_request


@pytest.fixture
def fake_provider() -> FakePaymentProvider:
    return FakePaymentProvider()


@pytest.fixture
def fake_email_sender() -> FakeEmailSender:
    return FakeEmailSender()


@pytest.fixture
def fake_captcha() -> FakeCaptchaVerifier:
    return FakeCaptchaVerifier()


@pytest.fixture
def dependencies_factory(fake_provider: FakePaymentProvider, fake_email_sender: FakeEmailSender):
    """Monta GatewayDependencies; kwargs substituem campos do padrão."""

    def _build(**overrides: Any) -> GatewayDependencies:
        defaults = GatewayDependencies(
            allowed_origins=(ALLOWED_ORIGIN,),
            rate_limiter=RateLimiter(MemoryRateLimitStore()),
            custom_order_rate_limit=RateLimitConfig(limit=5, window_ms=60_000),
            price_allowlist=PriceAllowlistConfig(
                enforce=True, allowed_price_ids=frozenset({"price_abc", "price_def"})
            ),
            checkout=CheckoutOrchestrator(
                provider=fake_provider,
                success_url="https://shop.example.com/success",
                cancel_url="https://shop.example.com/cart",
            ),
            payment_events=PaymentEventRouter(fake_provider),
            custom_orders=SubmitCustomOrderUseCase(
                email_sender=fake_email_sender,
                order_email="orders@shop.example.com",
            ),
            webhook_secret=WEBHOOK_SECRET,
        )
        return replace(defaults, **overrides)

    return _build
