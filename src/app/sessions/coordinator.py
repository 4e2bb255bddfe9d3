"""Coordenador do estado da sessão WhatsApp.

Único dono da FSM e do código de pareamento pendente. Recebe eventos do
cliente de sessão (mesmo event loop das requisições) e publica um novo
SessionStatus imutável a cada mudança. Handlers HTTP apenas leem o
snapshot atual.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.sessions.status import SessionStatus
from fsm import SessionEvent, SessionStateMachine, create_fsm

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Eventos que descartam o código QR pendente
_CLEARS_PAIRING_CODE = frozenset({
    SessionEvent.READY,
    SessionEvent.AUTH_FAILURE,
    SessionEvent.DISCONNECTED,
})

# Nível de log por evento
_EVENT_LOG_LEVELS: dict[SessionEvent, int] = {
    SessionEvent.QR_ISSUED: logging.INFO,
    SessionEvent.AUTHENTICATED: logging.INFO,
    SessionEvent.READY: logging.INFO,
    SessionEvent.AUTH_FAILURE: logging.ERROR,
    SessionEvent.DISCONNECTED: logging.WARNING,
}


class SessionCoordinator:
    """Aplica eventos de ciclo de vida e expõe o snapshot da sessão.

    Args:
        machine: FSM da sessão (cria uma nova se None)
        on_pairing_code: Callback chamado com cada novo código QR
            (ex: impressão no terminal)
    """

    __slots__ = ("_machine", "_on_pairing_code", "_status")

    def __init__(
        self,
        machine: SessionStateMachine | None = None,
        on_pairing_code: Callable[[str], None] | None = None,
    ) -> None:
        self._machine = machine or create_fsm()
        self._on_pairing_code = on_pairing_code
        self._status = SessionStatus(state=self._machine.current_state)

    def snapshot(self) -> SessionStatus:
        """Retorna o estado mais recente (objeto imutável)."""
        return self._status

    @property
    def is_ready(self) -> bool:
        return self._status.ready

    def handle_event(self, event: SessionEvent, detail: str | None = None) -> SessionStatus:
        """Aplica um evento do cliente de sessão.

        Args:
            event: Evento emitido pelo motor
            detail: Código QR (`qr`) ou motivo (`auth_failure`/`disconnected`)

        Returns:
            Snapshot resultante (inalterado se a transição for rejeitada)
        """
        previous = self._status
        reason = None if event is SessionEvent.QR_ISSUED else detail
        result = self._machine.apply_event(event, reason=reason)

        if not result.success:
            logger.warning(
                "session_transition_rejected",
                extra={
                    "trigger": event.value,
                    "reason": result.error_reason,
                    **self._machine.get_state_summary(),
                },
            )
            return previous

        pairing_code = previous.pending_pairing_code
        if event is SessionEvent.QR_ISSUED:
            pairing_code = detail
        elif event in _CLEARS_PAIRING_CODE:
            pairing_code = None

        self._status = SessionStatus(
            state=self._machine.current_state,
            pending_pairing_code=pairing_code,
        )
        logger.log(
            _EVENT_LOG_LEVELS[event],
            "session_transition",
            extra={
                **(result.transition.to_log_dict() if result.transition else {}),
                **self._status.to_log_dict(),
            },
        )

        if event is SessionEvent.QR_ISSUED and detail and self._on_pairing_code:
            self._notify_pairing_code(detail)

        return self._status

    def _notify_pairing_code(self, code: str) -> None:
        try:
            self._on_pairing_code(code)  # type: ignore[misc]
        except Exception:
            logger.exception("pairing_code_callback_failed")
