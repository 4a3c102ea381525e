"""Modelo de domínio do pedido personalizado."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_COLORS = 10


class CustomOrderPayload(BaseModel):
    """Pedido personalizado sanitizado.

    design_image, quando presente, é um data URI já verificado
    (tipo permitido e tamanho decodificado dentro do teto).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    product_type: str
    colors: tuple[str, ...] = Field(..., min_length=1, max_length=MAX_COLORS)
    orientation: str = ""
    stitch_type: str = ""
    design_image: str | None = None
    captcha_token: str | None = None
