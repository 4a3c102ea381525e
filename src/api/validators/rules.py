"""Passos reutilizáveis para `chain`.

Cada fábrica devolve um passo `valor -> ValidationResult`.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from api.validators.result import ValidationResult, invalid, valid
from api.validators.sanitizer import sanitize_text

if TYPE_CHECKING:
    from collections.abc import Callable


def is_string(error: str) -> Callable[[Any], ValidationResult[Any]]:
    def _step(value: Any) -> ValidationResult[Any]:
        return valid(value) if isinstance(value, str) else invalid(error)

    return _step


def trimmed(value: str) -> ValidationResult[str]:
    return valid(value.strip())


def not_empty(error: str) -> Callable[[Any], ValidationResult[Any]]:
    def _step(value: Any) -> ValidationResult[Any]:
        return valid(value) if value else invalid(error)

    return _step


def length_between(minimum: int, maximum: int, error: str) -> Callable[[Any], ValidationResult[Any]]:
    def _step(value: Any) -> ValidationResult[Any]:
        return valid(value) if minimum <= len(value) <= maximum else invalid(error)

    return _step


def matches(pattern: re.Pattern[str], error: str) -> Callable[[Any], ValidationResult[Any]]:
    def _step(value: Any) -> ValidationResult[Any]:
        return valid(value) if pattern.fullmatch(value) else invalid(error)

    return _step


def sanitized(max_length: int) -> Callable[[Any], ValidationResult[Any]]:
    def _step(value: Any) -> ValidationResult[Any]:
        return valid(sanitize_text(value, max_length))

    return _step


def integer_between(minimum: int, maximum: int, error: str) -> Callable[[Any], ValidationResult[Any]]:
    """Inteiro JSON no intervalo; bool é rejeitado, float integral é aceito."""

    def _step(value: Any) -> ValidationResult[Any]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return invalid(error)
        if isinstance(value, float):
            if not value.is_integer():
                return invalid(error)
            value = int(value)
        return valid(value) if minimum <= value <= maximum else invalid(error)

    return _step
