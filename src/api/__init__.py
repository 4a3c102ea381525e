"""API — camada de borda do gateway.

Responsabilidades:
- Receber requests do browser e do provedor de pagamento
- Gate de origem e leitura de corpo com teto de bytes
- Validar assinaturas e payloads
- Respostas JSON com CORS

Subpastas:
- http/: primitivas compartilhadas (origem, corpo, respostas)
- connectors/: adapters de borda por provedor (webhook Stripe)
- validators/: validação e sanitização de payloads
- routes/: endpoints HTTP

NÃO PODE conter: criação de sessões no provedor ou envio de email.
"""
