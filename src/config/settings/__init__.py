"""Agregador de settings do WhatsApp Relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por componente para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Remote content fetcher
from config.settings.fetch import (
    DEFAULT_MIME_TYPE,
    FetchSettings,
    get_fetch_settings,
)

# PDF renderer
from config.settings.pdf import (
    A4_VIEWPORT_HEIGHT,
    A4_VIEWPORT_WIDTH,
    PdfSettings,
    get_pdf_settings,
)

# WhatsApp session
from config.settings.whatsapp import (
    RECIPIENT_SUFFIX,
    WHATSAPP_WEB_URL,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    # Constants
    "A4_VIEWPORT_HEIGHT",
    "A4_VIEWPORT_WIDTH",
    "DEFAULT_MIME_TYPE",
    "DEFAULT_PORT",
    "RECIPIENT_SUFFIX",
    "WHATSAPP_WEB_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Components
    "FetchSettings",
    "PdfSettings",
    "WhatsAppSettings",
    "get_base_settings",
    "get_fetch_settings",
    "get_pdf_settings",
    "get_whatsapp_settings",
]
