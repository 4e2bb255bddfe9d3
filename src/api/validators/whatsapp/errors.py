"""Erros de validação de requisições outbound."""

from __future__ import annotations


class ValidationError(Exception):
    """Requisição sem campo obrigatório (mapeado para HTTP 400).

    Attributes:
        missing_fields: Campos ausentes ou vazios, na ordem declarada
    """

    def __init__(self, message: str, missing_fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing_fields = missing_fields
