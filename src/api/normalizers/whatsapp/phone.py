"""Normalização de telefone para identificador de destinatário.

Converte números digitados livremente ("+55 11 99999-8888") no formato
de chat individual do protocolo ("5511999998888@c.us").

Não há validação de país/dígitos: entradas malformadas seguem adiante e
falham no cliente de sessão com erro do próprio protocolo.
"""

from __future__ import annotations

from config.settings.whatsapp import RECIPIENT_SUFFIX

# Caracteres de formatação removidos do número
_STRIP_TABLE = str.maketrans("", "", "+ -")


def normalize_recipient_id(phone: str) -> str:
    """Retorna o identificador canônico de destinatário.

    Remove `+`, espaços e hífens; acrescenta o sufixo de usuário se
    ausente. Idempotente: normalizar um id canônico não o altera.

    Args:
        phone: Número em formato livre (ou id já canônico)

    Returns:
        Identificador no formato `<digitos>@c.us`
    """
    recipient_id = phone.translate(_STRIP_TABLE)
    if not recipient_id.endswith(RECIPIENT_SUFFIX):
        recipient_id = f"{recipient_id}{RECIPIENT_SUFFIX}"
    return recipient_id


def recipient_digits(recipient_id: str) -> str:
    """Retorna a parte do número antes do `@` (usada para abrir o chat)."""
    return recipient_id.partition("@")[0]
