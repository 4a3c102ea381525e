"""Allowlist de price IDs do Stripe.

Dois modos:
- enforce: qualquer price ID fora da lista rejeita o checkout inteiro
- advisory: lista configurada sem enforce; violações só geram log
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from utils.errors import ClientValidationError, ServerMisconfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PriceAllowlistConfig:
    """Política de allowlist carregada uma vez por processo."""

    enforce: bool = False
    allowed_price_ids: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class PriceAllowlistResult:
    """Price IDs fora da allowlist, na ordem do carrinho."""

    violating_ids: tuple[str, ...] = ()

    @property
    def has_violations(self) -> bool:
        return bool(self.violating_ids)


def classify(price_ids: Iterable[str], config: PriceAllowlistConfig) -> PriceAllowlistResult:
    """Separa os price IDs que não estão na allowlist."""
    return PriceAllowlistResult(
        violating_ids=tuple(
            price_id for price_id in price_ids if price_id not in config.allowed_price_ids
        )
    )


def enforce_price_allowlist(price_ids: Iterable[str], config: PriceAllowlistConfig) -> None:
    """Aplica a política de allowlist ao carrinho.

    Raises:
        ServerMisconfigurationError: enforce ativo com allowlist vazia
        ClientValidationError: enforce ativo e carrinho com price ID não aprovado
    """
    ids = list(price_ids)

    if config.enforce:
        if not config.allowed_price_ids:
            raise ServerMisconfigurationError(
                "Server misconfigured: ENFORCE_STRIPE_PRICE_ALLOWLIST is enabled "
                "but ALLOWED_STRIPE_PRICE_IDS is empty."
            )
        result = classify(ids, config)
        if result.has_violations:
            logger.warning(
                "checkout_rejected_price_not_allowlisted",
                extra={"invalid_ids": list(result.violating_ids)},
            )
            raise ClientValidationError("Cart contains invalid items.")
        return

    if config.allowed_price_ids:
        result = classify(ids, config)
        if result.has_violations:
            logger.warning(
                "checkout_warning_price_not_allowlisted",
                extra={"invalid_ids": list(result.violating_ids)},
            )
