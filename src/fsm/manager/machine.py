"""
Máquina de estados (SessionStateMachine) da sessão WhatsApp.

Aplica eventos do cliente de sessão ao estado atual, validando a
transição contra o mapa e os guards. Guarda apenas a última transição.
"""

from typing import Any

from fsm.rules.guards import GuardResult, evaluate_guards
from fsm.states.events import SessionEvent
from fsm.states.session import (
    DEFAULT_INITIAL_STATE,
    SessionState,
    is_ready,
)
from fsm.transitions.rules import (
    get_valid_targets,
    is_transition_valid,
    target_for_event,
)
from fsm.types.transition import StateTransition, TransitionResult


class SessionStateMachine:
    """
    Máquina de estados da sessão de mensageria.

    Attributes:
        current_state: Estado atual da máquina
        last_transition: Última transição aplicada (None no início)
    """

    __slots__ = ("_current_state", "_last_transition")

    def __init__(self, initial_state: SessionState | None = None) -> None:
        """
        Inicializa a máquina de estados.

        Args:
            initial_state: Estado inicial (usa DEFAULT_INITIAL_STATE se None)
        """
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._last_transition: StateTransition | None = None

    @property
    def current_state(self) -> SessionState:
        """Estado atual da máquina."""
        return self._current_state

    @property
    def last_transition(self) -> StateTransition | None:
        """Última transição aplicada."""
        return self._last_transition

    @property
    def is_ready(self) -> bool:
        """Verifica se a sessão aceita envio."""
        return is_ready(self._current_state)

    def get_valid_targets(self) -> frozenset[SessionState]:
        """Retorna estados de destino válidos a partir do estado atual."""
        return get_valid_targets(self._current_state)

    def apply_event(
        self,
        event: SessionEvent,
        reason: str | None = None,
    ) -> TransitionResult:
        """
        Tenta aplicar um evento do cliente de sessão.

        Args:
            event: Evento recebido
            reason: Motivo informado pelo motor (opcional, sem PII)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        target = target_for_event(event)

        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        guard_result: GuardResult = evaluate_guards(self._current_state, target)
        if not guard_result.allowed:
            return TransitionResult(
                success=False,
                error_reason=guard_result.reason,
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=event,
            reason=reason,
        )

        self._current_state = target
        self._last_transition = transition

        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        last = self._last_transition
        return {
            "current_state": self._current_state.name,
            "is_ready": self.is_ready,
            "last_trigger": last.trigger.value if last else None,
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }


def create_fsm(initial_state: SessionState | None = None) -> SessionStateMachine:
    """
    Factory function para criar uma FSM de sessão.

    Args:
        initial_state: Estado inicial (opcional)

    Returns:
        SessionStateMachine configurada
    """
    return SessionStateMachine(initial_state=initial_state)
