"""
Eventos emitidos pelo cliente de sessão (motor WhatsApp Web).

Os valores são os nomes de evento usados nos logs e nos listeners.
"""

from enum import StrEnum


class SessionEvent(StrEnum):
    """Eventos de ciclo de vida da sessão."""

    QR_ISSUED = "qr"
    AUTHENTICATED = "authenticated"
    READY = "ready"
    AUTH_FAILURE = "auth_failure"
    DISCONNECTED = "disconnected"

    def __str__(self) -> str:
        return self.value
