"""Validadores das requisições de envio WhatsApp.

Uso:
    from api.validators.whatsapp import ValidationError, require_fields

    require_fields({"phone": phone, "text": text}, "phone", "text")
"""

from api.validators.whatsapp.errors import ValidationError
from api.validators.whatsapp.fields import require_fields

__all__ = [
    "ValidationError",
    "require_fields",
]
