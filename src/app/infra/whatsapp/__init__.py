"""Motor de sessão WhatsApp Web (Chromium via Playwright)."""

from app.infra.whatsapp.page_phase import PagePhase, PagePhaseTracker
from app.infra.whatsapp.qr_terminal import print_pairing_qr
from app.infra.whatsapp.web_client import WhatsAppWebClient, create_whatsapp_client

__all__ = [
    "PagePhase",
    "PagePhaseTracker",
    "WhatsAppWebClient",
    "create_whatsapp_client",
    "print_pairing_qr",
]
