"""Envelope de evento do provedor de pagamento."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebhookEnvelope(BaseModel):
    """Notificação autenticada.

    Só é construída depois da verificação de assinatura sobre o corpo bruto.
    """

    model_config = ConfigDict(frozen=True)

    event_type: str
    event_id: str
    payload: dict[str, Any] = Field(default_factory=dict)

    @property
    def data_object(self) -> dict[str, Any]:
        """Objeto principal do evento (data.object)."""
        data = self.payload.get("data")
        if not isinstance(data, dict):
            return {}
        obj = data.get("object")
        return obj if isinstance(obj, dict) else {}
