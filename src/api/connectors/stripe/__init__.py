"""Connector Stripe — borda de entrada dos eventos de pagamento."""
