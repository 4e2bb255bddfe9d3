"""
Regras de transição válidas entre estados da sessão.

Define o grafo de transições e o estado de destino de cada evento
emitido pelo cliente de sessão.
"""

from fsm.states.events import SessionEvent
from fsm.states.session import DEFAULT_INITIAL_STATE, SessionState

# Tipagem explícita do mapa de transições
TransitionMap = dict[SessionState, frozenset[SessionState]]

# Mapa de transições válidas
# Chave: estado de origem
# Valor: conjunto de estados de destino permitidos
VALID_TRANSITIONS: TransitionMap = {
    # UNPAIRED: QR novo, sessão restaurada do perfil ou nova falha
    SessionState.UNPAIRED: frozenset({
        SessionState.UNPAIRED,
        SessionState.AWAITING_SCAN,
        SessionState.AUTHENTICATED,
        SessionState.READY,
    }),

    # AWAITING_SCAN: QR renovado, leitura aceita ou falha
    SessionState.AWAITING_SCAN: frozenset({
        SessionState.AWAITING_SCAN,  # Permite loop para QR renovado
        SessionState.AUTHENTICATED,
        SessionState.READY,
        SessionState.UNPAIRED,
    }),

    # AUTHENTICATED: carregou conversas, pareamento revogado ou queda
    SessionState.AUTHENTICATED: frozenset({
        SessionState.READY,
        SessionState.AWAITING_SCAN,
        SessionState.UNPAIRED,
    }),

    # READY: logout remoto (novo QR) ou desconexão
    SessionState.READY: frozenset({
        SessionState.AWAITING_SCAN,
        SessionState.UNPAIRED,
    }),
}

# Estado de destino de cada evento
EVENT_TARGETS: dict[SessionEvent, SessionState] = {
    SessionEvent.QR_ISSUED: SessionState.AWAITING_SCAN,
    SessionEvent.AUTHENTICATED: SessionState.AUTHENTICATED,
    SessionEvent.READY: SessionState.READY,
    SessionEvent.AUTH_FAILURE: SessionState.UNPAIRED,
    SessionEvent.DISCONNECTED: SessionState.UNPAIRED,
}


def get_valid_targets(state: SessionState) -> frozenset[SessionState]:
    """
    Retorna os estados de destino válidos para um estado de origem.

    Args:
        state: Estado de origem

    Returns:
        Conjunto de estados de destino permitidos
    """
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: SessionState, to_state: SessionState) -> bool:
    """
    Verifica se uma transição é válida segundo as regras definidas.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino

    Returns:
        True se a transição é permitida, False caso contrário
    """
    return to_state in get_valid_targets(from_state)


def target_for_event(event: SessionEvent) -> SessionState:
    """Retorna o estado de destino de um evento."""
    return EVENT_TARGETS[event]


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Todos os eventos têm estado de destino
    - READY é alcançável a partir do estado inicial

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in SessionState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for event in SessionEvent:
        if event not in EVENT_TARGETS:
            errors.append(f"Evento {event.name} sem estado de destino")

    for from_state, targets in VALID_TRANSITIONS.items():
        for target in targets:
            if not isinstance(target, SessionState):
                errors.append(
                    f"Transição {from_state.name} → {target}: destino inválido"
                )

    if SessionState.READY not in _reachable_from(DEFAULT_INITIAL_STATE):
        errors.append("READY não é alcançável a partir do estado inicial")

    return errors


def _reachable_from(start: SessionState) -> set[SessionState]:
    seen = {start}
    pending = [start]
    while pending:
        for target in get_valid_targets(pending.pop()):
            if target not in seen:
                seen.add(target)
                pending.append(target)
    return seen
