"""Formatter JSON do gateway.

Cada linha é um objeto com `timestamp` (UTC, ISO 8601), `level`, `logger`,
`message`, `correlation_id`, `service` e os campos `extra` do evento.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = ("levelname", "name", "message", "correlation_id", "service")

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON com timestamp UTC e campos renomeados."""
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        timestamp=True,
        json_ensure_ascii=False,
    )
