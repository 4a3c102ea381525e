"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="checkout_gateway")
    logger = get_logger(__name__)
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, PiiRedactionFilter, email_domain
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "PiiRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "email_domain",
    "get_logger",
]
