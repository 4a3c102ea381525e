"""Resultado tagueado de validação e encadeamento first-error.

Validadores não levantam exceções: devolvem ValidationResult com valor
ou erro. `chain` aplica passos em ordem e para no primeiro erro.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


class _Missing:
    """Marca campo ausente no JSON (diferente de null)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class ValidationResult(Generic[T]):
    """Valor validado ou mensagem do primeiro erro."""

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def valid(value: T) -> ValidationResult[T]:
    return ValidationResult(value=value)


def invalid(error: str) -> ValidationResult[Any]:
    return ValidationResult(error=error)



def chain(value: Any, *steps: Callable[[Any], ValidationResult[Any]]) -> ValidationResult[Any]:
    """Passa o valor por cada passo; o primeiro erro encerra a cadeia."""
    result: ValidationResult[Any] = valid(value)
    for step in steps:
        result = step(result.value)
        if not result.ok:
            return result
    return result


def propagate(result: ValidationResult[Any]) -> ValidationResult[Any]:
    """Repassa o erro de um resultado inválido para outro tipo de valor."""
    return ValidationResult(error=result.error)
