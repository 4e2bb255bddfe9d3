"""Cliente de sessão fake para testes (implementa MessagingSessionClient)."""

from __future__ import annotations

from app.protocols.messaging_client import SessionEventListener
from app.protocols.models import MediaPayload
from fsm import SessionEvent

DEFAULT_MESSAGE_ID = "true_1234567@c.us_3EB0C767D26A1D5A6B"


class FakeSessionClient:
    """Registra envios e permite emitir eventos de ciclo de vida."""

    def __init__(
        self,
        message_id: str = DEFAULT_MESSAGE_ID,
        initial_events: list[SessionEvent] | None = None,
        fail_initialize: Exception | None = None,
    ) -> None:
        self.message_id = message_id
        self.initial_events = initial_events or []
        self.fail_initialize = fail_initialize
        self.listeners: list[SessionEventListener] = []
        self.texts: list[tuple[str, str]] = []
        self.media: list[tuple[str, MediaPayload, str]] = []
        self.send_error: Exception | None = None
        self.initialized = False
        self.closed = False

    def subscribe(self, listener: SessionEventListener) -> None:
        self.listeners.append(listener)

    def emit(self, event: SessionEvent, detail: str | None = None) -> None:
        for listener in self.listeners:
            listener(event, detail)

    async def initialize(self) -> None:
        if self.fail_initialize is not None:
            raise self.fail_initialize
        self.initialized = True
        for event in self.initial_events:
            self.emit(event)

    async def close(self) -> None:
        self.closed = True

    async def send_text(self, recipient_id: str, text: str) -> str:
        if self.send_error is not None:
            raise self.send_error
        self.texts.append((recipient_id, text))
        return self.message_id

    async def send_media(self, recipient_id: str, media: MediaPayload, caption: str = "") -> str:
        if self.send_error is not None:
            raise self.send_error
        self.media.append((recipient_id, media, caption))
        return self.message_id
