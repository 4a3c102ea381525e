"""Primitivas HTTP compartilhadas pelas rotas.

- origin: allowlist de origens e headers CORS
- body_reader: leitura de corpo com teto de bytes
- responses: respostas JSON (sucesso, erro, preflight)
- guard: tradução de GatewayError em resposta
- request_context: correlation id, IP do cliente e dependências
"""

from api.http.body_reader import parse_content_length, parse_json_body, read_body_with_limit
from api.http.guard import run_guarded
from api.http.origin import cors_headers, is_origin_allowed, resolve_allow_origin
from api.http.request_context import (
    correlation_scope,
    get_client_ip,
    get_dependencies,
    require_allowed_origin,
)
from api.http.responses import empty_response, error_response, json_error, json_response

__all__ = [
    "correlation_scope",
    "cors_headers",
    "empty_response",
    "error_response",
    "get_client_ip",
    "get_dependencies",
    "is_origin_allowed",
    "json_error",
    "json_response",
    "parse_content_length",
    "parse_json_body",
    "read_body_with_limit",
    "require_allowed_origin",
    "resolve_allow_origin",
    "run_guarded",
]
