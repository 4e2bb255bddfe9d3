"""Filters de logging para injeção de contexto.

Filters são responsáveis por adicionar campos contextuais
aos logs sem que o chamador precise informá-los manualmente,
e por mascarar identificadores de destinatário.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: whatsapp_relay)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos de record tratados como identificadores de destinatário
RECIPIENT_FIELDS = ("recipient_id", "phone")

# Dígitos preservados ao mascarar
VISIBLE_DIGITS = 4


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class RecipientMaskFilter(logging.Filter):
    """Mascara números de telefone passados via `extra`.

    `5511999998888@c.us` vira `*********8888@c.us`.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for field in RECIPIENT_FIELDS:
            value = getattr(record, field, None)
            if isinstance(value, str) and value:
                setattr(record, field, mask_recipient(value))
        return True


def mask_recipient(value: str) -> str:
    """Mantém apenas os últimos dígitos do número (e o sufixo, se houver)."""
    number, sep, suffix = value.partition("@")
    if len(number) <= VISIBLE_DIGITS:
        masked = "*" * len(number)
    else:
        masked = "*" * (len(number) - VISIBLE_DIGITS) + number[-VISIBLE_DIGITS:]
    return f"{masked}{sep}{suffix}"
