"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
    parse_csv,
    parse_environment,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "get_base_settings",
    "parse_csv",
    "parse_environment",
]
