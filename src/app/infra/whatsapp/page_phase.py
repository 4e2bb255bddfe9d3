"""Tradução do estado visível do WhatsApp Web em eventos de sessão.

O watcher do cliente inspeciona a página periodicamente e classifica o
que vê em uma PagePhase. Este tracker compara com as leituras anteriores
e decide quais eventos emitir, na ordem em que o WhatsApp Web os
emite (`authenticated` antes de `ready`, `disconnected` antes do novo `qr`).
"""

from __future__ import annotations

from enum import StrEnum

from fsm import SessionEvent

EmittedEvent = tuple[SessionEvent, str | None]

LOGOUT_REASON = "LOGOUT"
PAIRING_REJECTED_REASON = "pairing rejected"


class PagePhase(StrEnum):
    """O que a página mostra no momento da inspeção."""

    QR = "qr"  # Tela de pareamento com QR code
    LOADING = "loading"  # Tela de carregamento (sincronizando conversas)
    CHATS = "chats"  # Lista de conversas visível


class PagePhaseTracker:
    """Mantém as flags de autenticação/prontidão vistas pelo watcher."""

    __slots__ = ("_authenticated", "_last_qr", "_ready")

    def __init__(self) -> None:
        self._authenticated = False
        self._ready = False
        self._last_qr: str | None = None

    @property
    def ready(self) -> bool:
        return self._ready

    def update(self, phase: PagePhase, qr_code: str | None = None) -> list[EmittedEvent]:
        """Registra uma leitura da página e retorna os eventos a emitir."""
        if phase is PagePhase.QR:
            return self._on_qr(qr_code)
        if phase is PagePhase.LOADING:
            return self._on_loading()
        return self._on_chats()

    def disconnect(self, reason: str) -> list[EmittedEvent]:
        """Página fechada ou travada: encerra a sessão observada."""
        had_session = self._ready or self._authenticated or self._last_qr is not None
        self._reset()
        return [(SessionEvent.DISCONNECTED, reason)] if had_session else []

    def _on_qr(self, qr_code: str | None) -> list[EmittedEvent]:
        events: list[EmittedEvent] = []
        if self._ready:
            events.append((SessionEvent.DISCONNECTED, LOGOUT_REASON))
            self._reset()
        elif self._authenticated:
            events.append((SessionEvent.AUTH_FAILURE, PAIRING_REJECTED_REASON))
            self._reset()

        if qr_code and qr_code != self._last_qr:
            self._last_qr = qr_code
            events.append((SessionEvent.QR_ISSUED, qr_code))
        return events

    def _on_loading(self) -> list[EmittedEvent]:
        # QR sumiu e a página carrega: pareamento aceito
        if self._last_qr is not None and not (self._authenticated or self._ready):
            self._authenticated = True
            return [(SessionEvent.AUTHENTICATED, None)]
        return []

    def _on_chats(self) -> list[EmittedEvent]:
        events: list[EmittedEvent] = []
        if not self._authenticated:
            # Sessão restaurada do perfil: não houve QR
            self._authenticated = True
            events.append((SessionEvent.AUTHENTICATED, None))
        if not self._ready:
            self._ready = True
            self._last_qr = None
            events.append((SessionEvent.READY, None))
        return events

    def _reset(self) -> None:
        self._authenticated = False
        self._ready = False
        self._last_qr = None
