"""Testes dos passos de validação e das regex ancoradas."""

from __future__ import annotations

import base64

import pytest

from api.validators import PRICE_ID_RE, is_valid_email
from api.validators.design_image import decode_design_image
from api.validators.result import chain
from api.validators.rules import matches, not_empty, trimmed


class TestMatches:
    @pytest.mark.parametrize("value", ["price_abc\n", "price_abc\r\n", "xprice_abc"])
    def test_pattern_must_cover_whole_value(self, value: str) -> None:
        assert matches(PRICE_ID_RE, "bad")(value).error == "bad"

    def test_full_value_matches(self) -> None:
        assert matches(PRICE_ID_RE, "bad")("price_abc").value == "price_abc"

    def test_trim_runs_before_match(self) -> None:
        result = chain(" price_abc\n", trimmed, not_empty("empty"), matches(PRICE_ID_RE, "bad"))
        assert result.value == "price_abc"


class TestAnchoredFormats:
    @pytest.mark.parametrize("value", ["ana@example.com\n", "ana@example.com\nx@y.z"])
    def test_email_with_newline_is_rejected(self, value: str) -> None:
        assert is_valid_email(value) is False

    def test_design_image_with_trailing_newline_is_rejected(self) -> None:
        payload = base64.b64encode(b"\x89PNG").decode()
        assert decode_design_image(f"data:image/png;base64,{payload}\n") is None
        assert decode_design_image(f"data:image/png;base64,{payload}") == ("image/png", b"\x89PNG")
