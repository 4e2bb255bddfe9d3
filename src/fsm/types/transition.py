"""
Tipos e estruturas de dados para transições de estado.

Este módulo define os tipos usados para representar
transições entre estados da sessão.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.events import SessionEvent
from fsm.states.session import SessionState


@dataclass(frozen=True, slots=True)
class StateTransition:
    """
    Representa uma transição de estado da sessão.

    Attributes:
        from_state: Estado de origem da transição
        to_state: Estado de destino da transição
        trigger: Evento do cliente de sessão que causou a transição
        reason: Motivo informado pelo motor (ex: motivo de desconexão)
        timestamp: Momento da transição (UTC)
    """

    from_state: SessionState
    to_state: SessionState
    trigger: SessionEvent
    reason: str | None = None
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(UTC)
    )

    def __post_init__(self) -> None:
        """Valida invariantes do objeto após inicialização."""
        if not isinstance(self.trigger, SessionEvent):
            raise ValueError(f"trigger deve ser SessionEvent, recebido: {self.trigger!r}")

    def to_log_dict(self) -> dict[str, Any]:
        """
        Retorna representação segura para logs.

        O código de pareamento nunca faz parte da transição.
        """
        return {
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger.value,
            "reason": self.reason,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """
    Resultado de uma tentativa de transição.

    Attributes:
        success: Se a transição foi bem-sucedida
        transition: Dados da transição (se success=True)
        error_reason: Motivo da falha (se success=False)
    """

    success: bool
    transition: StateTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        """Valida consistência do resultado."""
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
