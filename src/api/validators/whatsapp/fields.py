"""Validação de campos obrigatórios das requisições de envio."""

from __future__ import annotations

from collections.abc import Mapping

from api.validators.whatsapp.errors import ValidationError


def require_fields(values: Mapping[str, object], *names: str) -> None:
    """Garante que os campos informados existem e não são vazios.

    A mensagem cita todos os campos exigidos pelo endpoint, não apenas
    os ausentes ("phone and text are required").

    Args:
        values: Campos recebidos, indexados pelo nome público (ex: "fileUrl")
        names: Nomes dos campos obrigatórios

    Raises:
        ValidationError: Se algum campo estiver ausente, None ou vazio
    """
    missing = tuple(name for name in names if _is_blank(values.get(name)))
    if not missing:
        return

    if len(names) == 1:
        message = f"{names[0]} is required"
    else:
        message = f"{', '.join(names[:-1])} and {names[-1]} are required"
    raise ValidationError(message, missing_fields=missing)


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value == ""
