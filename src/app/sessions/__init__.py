"""Módulo de sessão WhatsApp.

Exporta o coordenador de estado e o snapshot lido pela API.
"""

from app.sessions.coordinator import SessionCoordinator
from app.sessions.status import SessionStatus

__all__ = [
    "SessionCoordinator",
    "SessionStatus",
]
