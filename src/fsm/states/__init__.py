"""
Exports públicos do módulo fsm/states.

Estados e eventos do ciclo de vida da sessão WhatsApp.
"""

from fsm.states.events import SessionEvent
from fsm.states.session import (
    DEFAULT_INITIAL_STATE,
    SENDABLE_STATES,
    SessionState,
    is_ready,
    is_valid_state,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "SENDABLE_STATES",
    "SessionEvent",
    "SessionState",
    "is_ready",
    "is_valid_state",
]
