"""
Módulo FSM: Máquina de Estados da sessão WhatsApp Web.

Modela o ciclo de pareamento (QR → autenticação → pronto) e as quedas
(falha de autenticação, desconexão) como transições explícitas.

Estrutura:
    - states/: Estados (SessionState) e eventos (SessionEvent)
    - transitions/: Regras de transição (VALID_TRANSITIONS, EVENT_TARGETS)
    - rules/: Guards e invariantes
    - manager/: Máquina de estados (SessionStateMachine)
    - types/: Tipos de dados (StateTransition, TransitionResult)
"""

# Manager
from fsm.manager import (
    SessionStateMachine,
    create_fsm,
)

# Guards/Rules
from fsm.rules import (
    GuardResult,
    evaluate_guards,
)

# Estados e eventos
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    SENDABLE_STATES,
    SessionEvent,
    SessionState,
    is_ready,
    is_valid_state,
)

# Transições
from fsm.transitions import (
    EVENT_TARGETS,
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    target_for_event,
    validate_transition_map,
)

# Types
from fsm.types import (
    StateTransition,
    TransitionResult,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "EVENT_TARGETS",
    "SENDABLE_STATES",
    # Transições
    "VALID_TRANSITIONS",
    # Guards
    "GuardResult",
    # Estados
    "SessionEvent",
    "SessionState",
    # Manager
    "SessionStateMachine",
    # Types
    "StateTransition",
    "TransitionResult",
    "create_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "is_ready",
    "is_transition_valid",
    "is_valid_state",
    "target_for_event",
    "validate_transition_map",
]
