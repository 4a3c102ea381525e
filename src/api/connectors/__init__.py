"""Connectors — adapters de borda para provedores externos.

Estrutura:
- stripe/webhook/: verificação de assinatura e parsing de eventos
"""

__all__: list[str] = []
