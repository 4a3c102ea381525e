"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (checkout, webhook, pedido personalizado, health)
- Gate de origem, leitura limitada e validação inicial
- Delegação para use_cases
- Respostas JSON com headers CORS

Estrutura:
- routes/checkout/: POST/OPTIONS /checkout
- routes/webhook/: POST/OPTIONS /webhook
- routes/custom_order/: POST/OPTIONS /custom-order
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
