"""Normalizer WhatsApp: telefone em formato livre para id de destinatário."""

from .phone import normalize_recipient_id, recipient_digits

__all__ = [
    "normalize_recipient_id",
    "recipient_digits",
]
