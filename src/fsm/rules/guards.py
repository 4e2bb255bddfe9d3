"""
Guards e invariantes para transições de estado.

Regras adicionais avaliadas depois do mapa de transições. Qualquer
guard que negue bloqueia a transição e o estado atual é mantido.
"""

from collections.abc import Callable

from fsm.states.session import SessionState, is_valid_state

# Estados que aceitam transição para si mesmos
REFLEXIVE_STATES: frozenset[SessionState] = frozenset({
    SessionState.UNPAIRED,  # auth_failure/disconnected sem sessão ativa
    SessionState.AWAITING_SCAN,  # QR renovado
})


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


Guard = Callable[[SessionState, SessionState], GuardResult]


def guard_valid_state(
    from_state: SessionState,
    to_state: SessionState,
) -> GuardResult:
    """Guard: ambos os estados devem pertencer ao enum."""
    if not is_valid_state(from_state):
        return GuardResult.deny(f"Estado de origem inválido: {from_state}")

    if not is_valid_state(to_state):
        return GuardResult.deny(f"Estado de destino inválido: {to_state}")

    return GuardResult.allow()


def guard_same_state(
    from_state: SessionState,
    to_state: SessionState,
) -> GuardResult:
    """
    Guard: Previne transição para o mesmo estado (exceto REFLEXIVE_STATES).

    Um segundo `ready` ou `authenticated` não gera nova transição.
    """
    if from_state == to_state and from_state not in REFLEXIVE_STATES:
        return GuardResult.deny(
            f"Transição reflexiva não permitida: {from_state.name} → {to_state.name}"
        )

    return GuardResult.allow()


# Lista de guards a serem aplicados em ordem
# Todos devem retornar allow() para a transição prosseguir
DEFAULT_GUARDS: list[Guard] = [
    guard_valid_state,
    guard_same_state,
]


def evaluate_guards(
    from_state: SessionState,
    to_state: SessionState,
    guards: list[Guard] | None = None,
) -> GuardResult:
    """
    Avalia todos os guards para uma transição.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino
        guards: Lista de guards a aplicar (usa DEFAULT_GUARDS se None)

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    guards_to_apply = guards if guards is not None else DEFAULT_GUARDS

    for guard in guards_to_apply:
        result = guard(from_state, to_state)
        if not result.allowed:
            return result

    return GuardResult.allow()
