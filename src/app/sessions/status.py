"""Snapshot imutável do estado da sessão, lido pelos handlers HTTP."""

from __future__ import annotations

from dataclasses import dataclass

from fsm import DEFAULT_INITIAL_STATE, SessionState, is_ready


@dataclass(frozen=True, slots=True)
class SessionStatus:
    """Estado observável da sessão.

    Attributes:
        state: Estado atual da FSM
        pending_pairing_code: Código QR aguardando leitura (None se não houver)
    """

    state: SessionState = DEFAULT_INITIAL_STATE
    pending_pairing_code: str | None = None

    @property
    def ready(self) -> bool:
        """True somente quando a sessão aceita envio."""
        return is_ready(self.state)

    @property
    def has_pairing_code(self) -> bool:
        return self.pending_pairing_code is not None

    def to_log_dict(self) -> dict[str, object]:
        """Representação para logs (o código QR nunca é logado)."""
        return {
            "state": self.state.name,
            "ready": self.ready,
            "has_pairing_code": self.has_pairing_code,
        }
