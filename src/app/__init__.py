"""App — coração do gateway: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos validados (checkout, pedido personalizado, webhook)
- use_cases/: checkout, eventos de pagamento, pedido personalizado
- services/: rate limiter e allowlist de preços
- infra/: implementações concretas de IO (Stripe, Resend, Turnstile, stores)
- protocols/: contratos/interfaces
- observability/: correlation id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
