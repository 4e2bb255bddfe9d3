"""Contrato do cliente de sessão de mensageria (motor externo).

O motor concreto (WhatsApp Web via Chromium) vive em app/infra/whatsapp.
O restante da aplicação depende apenas deste protocolo.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fsm import SessionEvent

    from .models import MediaPayload

# Listener de ciclo de vida: (evento, detalhe). O detalhe é o código QR
# em `qr` e o motivo informado pelo motor em `auth_failure`/`disconnected`.
SessionEventListener = Callable[["SessionEvent", "str | None"], None]


class MessagingSessionClient(Protocol):
    """Contrato mínimo do motor de sessão."""

    def subscribe(self, listener: SessionEventListener) -> None: ...

    async def initialize(self) -> None: ...

    async def close(self) -> None: ...

    async def send_text(self, recipient_id: str, text: str) -> str:
        """Envia texto e retorna o id serializado da mensagem."""
        ...

    async def send_media(
        self,
        recipient_id: str,
        media: MediaPayload,
        caption: str = "",
    ) -> str:
        """Envia mídia com legenda e retorna o id serializado da mensagem."""
        ...
