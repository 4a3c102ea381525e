"""Testes da leitura de corpo com teto de bytes."""

from __future__ import annotations

import pytest

from api.http.body_reader import (
    MAX_SAFE_CONTENT_LENGTH,
    parse_content_length,
    parse_json_body,
    read_body_with_limit,
)
from utils.errors import (
    ClientValidationError,
    InvalidBodyError,
    InvalidContentLengthError,
    PayloadTooLargeError,
)


class TestParseContentLength:
    def test_absent_header_returns_none(self) -> None:
        assert parse_content_length(None) is None

    def test_digits_are_parsed(self) -> None:
        assert parse_content_length("1024") == 1024
        assert parse_content_length(" 7 ") == 7

    @pytest.mark.parametrize("value", ["", "abc", "-1", "1.5", "12a", "+3"])
    def test_non_digit_values_are_rejected(self, value: str) -> None:
        with pytest.raises(InvalidContentLengthError):
            parse_content_length(value)

    def test_value_above_safe_integer_is_rejected(self) -> None:
        assert parse_content_length(str(MAX_SAFE_CONTENT_LENGTH)) == MAX_SAFE_CONTENT_LENGTH
        with pytest.raises(InvalidContentLengthError):
            parse_content_length(str(MAX_SAFE_CONTENT_LENGTH + 1))


class TestReadBodyWithLimit:
    @pytest.mark.asyncio
    async def test_returns_exact_bytes_across_chunks(self, request_factory) -> None:
        request = request_factory(chunks=[b'{"a":', b" 1", b"}"])

        body = await read_body_with_limit(request, max_bytes=100)

        assert body == b'{"a": 1}'

    @pytest.mark.asyncio
    async def test_declared_length_over_limit_never_touches_stream(self, request_factory) -> None:
        request = request_factory(body=b"x" * 10, headers={"Content-Length": "5000"})

        with pytest.raises(PayloadTooLargeError):
            await read_body_with_limit(request, max_bytes=100)

        assert request.receive_calls["calls"] == 0

    @pytest.mark.asyncio
    async def test_lying_header_is_caught_by_counter(self, request_factory) -> None:
        request = request_factory(
            chunks=[b"a" * 60, b"b" * 60, b"c" * 60],
            headers={"Content-Length": "10"},
        )

        with pytest.raises(PayloadTooLargeError):
            await read_body_with_limit(request, max_bytes=100)

        # Parou no chunk que estourou o teto
        assert request.receive_calls["calls"] == 2

    @pytest.mark.asyncio
    async def test_body_exactly_at_limit_is_accepted(self, request_factory) -> None:
        request = request_factory(chunks=[b"a" * 50, b"b" * 50])

        body = await read_body_with_limit(request, max_bytes=100)

        assert len(body) == 100

    @pytest.mark.asyncio
    async def test_malformed_header_is_rejected(self, request_factory) -> None:
        request = request_factory(body=b"{}", headers={"Content-Length": "abc"})

        with pytest.raises(InvalidContentLengthError):
            await read_body_with_limit(request, max_bytes=100)

    @pytest.mark.asyncio
    async def test_client_disconnect_is_invalid_body(self, request_factory) -> None:
        request = request_factory(chunks=[b"abc", b"def"], disconnect_after=1)

        with pytest.raises(InvalidBodyError):
            await read_body_with_limit(request, max_bytes=100)


class TestParseJsonBody:
    def test_parses_object(self) -> None:
        assert parse_json_body(b'{"items": []}') == {"items": []}

    @pytest.mark.parametrize("raw", [b"", b"{not json", b"\xff\xfe"])
    def test_invalid_json_is_client_error(self, raw: bytes) -> None:
        with pytest.raises(ClientValidationError) as exc_info:
            parse_json_body(raw)

        assert exc_info.value.public_message == "Invalid JSON request body."
        assert exc_info.value.status_code == 400
