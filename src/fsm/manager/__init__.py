"""
Exports públicos do módulo fsm/manager.

Máquina de estados (SessionStateMachine) da sessão WhatsApp.
"""

from fsm.manager.machine import (
    SessionStateMachine,
    create_fsm,
)

__all__ = [
    "SessionStateMachine",
    "create_fsm",
]
