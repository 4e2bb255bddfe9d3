"""Gerenciamento de correlation_id para rastreamento de requisições.

O correlation_id chega no header `X-Correlation-Id` (ou é gerado) e é
injetado nos logs de tudo que a requisição dispara: download, render
e envio. Usa ContextVar para ser async-safe.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

# Tamanho máximo aceito do header (valores maiores são descartados)
MAX_CORRELATION_ID_LENGTH = 128

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None/vazio/longo demais, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id if _is_acceptable(correlation_id) else _new_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def _new_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def _is_acceptable(value: str | None) -> bool:
    return bool(value) and len(value) <= MAX_CORRELATION_ID_LENGTH
