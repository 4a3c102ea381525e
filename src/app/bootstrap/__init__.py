"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e monta as
dependências compartilhadas pelos handlers.

Uso:
    from app.bootstrap import initialize_app, build_dependencies

    initialize_app()
    dependencies = build_dependencies()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import GatewayDependencies, build_dependencies
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_captcha_settings,
    get_cors_settings,
    get_email_settings,
    get_rate_limit_settings,
    get_stripe_settings,
)

SERVICE_NAME = "checkout_gateway"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"cors: {error}" for error in get_cors_settings().validate())
    errors.extend(f"stripe: {error}" for error in get_stripe_settings().validate())
    errors.extend(f"email: {error}" for error in get_email_settings().validate())
    errors.extend(f"captcha: {error}" for error in get_captcha_settings().validate())
    errors.extend(
        f"rate_limit: {error}" for error in get_rate_limit_settings().validate(base.redis_url)
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors


__all__ = [
    "SERVICE_NAME",
    "GatewayDependencies",
    "build_dependencies",
    "initialize_app",
    "validate_runtime_settings",
]
