"""Normalizers: conversão de entradas externas para formatos internos.

Estrutura:
- whatsapp/: telefone → identificador de destinatário do protocolo
"""

from .whatsapp import normalize_recipient_id, recipient_digits

__all__ = [
    "normalize_recipient_id",
    "recipient_digits",
]
