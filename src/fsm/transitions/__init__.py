"""
Exports públicos do módulo fsm/transitions.

Regras de transição válidas entre estados da sessão.
"""

from fsm.transitions.rules import (
    EVENT_TARGETS,
    VALID_TRANSITIONS,
    TransitionMap,
    get_valid_targets,
    is_transition_valid,
    target_for_event,
    validate_transition_map,
)

__all__ = [
    "EVENT_TARGETS",
    "VALID_TRANSITIONS",
    "TransitionMap",
    "get_valid_targets",
    "is_transition_valid",
    "target_for_event",
    "validate_transition_map",
]
