"""Testes do gate de origem e dos headers CORS."""

from __future__ import annotations

from api.http.origin import cors_headers, is_origin_allowed, resolve_allow_origin

ALLOWLIST = ("https://shop.example.com", "https://preview.example.com")


class TestIsOriginAllowed:
    def test_empty_allowlist_permits_everything(self) -> None:
        assert is_origin_allowed("https://evil.example", ()) is True
        assert is_origin_allowed(None, ()) is True

    def test_exact_match_is_allowed(self) -> None:
        assert is_origin_allowed("https://preview.example.com", ALLOWLIST) is True

    def test_missing_origin_is_denied_with_allowlist(self) -> None:
        assert is_origin_allowed(None, ALLOWLIST) is False
        assert is_origin_allowed("", ALLOWLIST) is False

    def test_prefix_or_suffix_is_not_a_match(self) -> None:
        assert is_origin_allowed("https://shop.example.com.evil.io", ALLOWLIST) is False
        assert is_origin_allowed("http://shop.example.com", ALLOWLIST) is False


class TestCorsHeaders:
    def test_reflects_matched_origin(self) -> None:
        assert resolve_allow_origin("https://preview.example.com", ALLOWLIST) == (
            "https://preview.example.com"
        )

    def test_falls_back_to_first_allowlist_entry(self) -> None:
        assert resolve_allow_origin("https://evil.example", ALLOWLIST) == ALLOWLIST[0]

    def test_wildcard_without_allowlist(self) -> None:
        headers = cors_headers("https://anything.example", ())

        assert headers["Access-Control-Allow-Origin"] == "*"
        assert "Vary" not in headers

    def test_full_header_set(self) -> None:
        headers = cors_headers("https://shop.example.com", ALLOWLIST)

        assert headers == {
            "Access-Control-Allow-Origin": "https://shop.example.com",
            "Access-Control-Allow-Methods": "POST, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type, Stripe-Signature, Idempotency-Key",
            "Access-Control-Max-Age": "3600",
            "Vary": "Origin",
        }
