"""Observabilidade: correlation_id de requisições para logs estruturados.

Uso:
    from app.observability import get_correlation_id, CorrelationIdMiddleware
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.middleware import CorrelationIdMiddleware

__all__ = [
    "CORRELATION_HEADER",
    "CorrelationIdMiddleware",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
