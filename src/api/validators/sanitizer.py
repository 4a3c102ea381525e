"""Sanitização de texto livre vindo do browser.

Ordem: remove < e >, esquemas `javascript:`, padrões de handler inline
(`onclick=`...), depois trim e truncamento.
"""

from __future__ import annotations

import re

_ANGLE_BRACKETS_RE = re.compile(r"[<>]")
_JAVASCRIPT_SCHEME_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+=", re.IGNORECASE)
_METADATA_KEY_RE = re.compile(r"[^a-zA-Z0-9_]")

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 254


def sanitize_text(value: str, max_length: int) -> str:
    """Remove substrings perigosas e trunca em `max_length`."""
    cleaned = _ANGLE_BRACKETS_RE.sub("", value)
    cleaned = _JAVASCRIPT_SCHEME_RE.sub("", cleaned)
    cleaned = _EVENT_HANDLER_RE.sub("", cleaned)
    return cleaned.strip()[:max_length]


def sanitize_identifier(value: str, max_length: int) -> str:
    """Restringe a [a-zA-Z0-9_], trocando o resto por `_`."""
    return _METADATA_KEY_RE.sub("_", value)[:max_length]


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.fullmatch(value))
