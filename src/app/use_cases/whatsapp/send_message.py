"""Use cases de envio de mensagens pela sessão WhatsApp.

Cada operação exige sessão pronta antes de qualquer trabalho: sem
sessão, nada é baixado nem renderizado e o cliente de sessão não é
chamado. Falhas de download, render ou envio sobem como UpstreamError.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.normalizers.whatsapp import normalize_recipient_id
from app.protocols.models import MediaMessage, SentMessage, TextMessage
from utils.errors import SessionNotReadyError

if TYPE_CHECKING:
    from app.protocols.content import ContentFetcherProtocol, PdfRendererProtocol
    from app.protocols.messaging_client import MessagingSessionClient
    from app.protocols.models import OutboundMessage
    from app.sessions import SessionCoordinator

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "document"


class SendMessageUseCase:
    """Orquestra normalização, download/render e envio."""

    def __init__(
        self,
        client: MessagingSessionClient,
        coordinator: SessionCoordinator,
        fetcher: ContentFetcherProtocol,
        renderer: PdfRendererProtocol,
    ) -> None:
        self._client = client
        self._coordinator = coordinator
        self._fetcher = fetcher
        self._renderer = renderer

    def ensure_ready(self) -> None:
        """Raises SessionNotReadyError se a sessão não estiver pronta."""
        if not self._coordinator.is_ready:
            raise SessionNotReadyError

    async def send_text(self, phone: str, text: str) -> SentMessage:
        self.ensure_ready()
        message = TextMessage(recipient_id=normalize_recipient_id(phone), text=text)
        return await self._dispatch(message)

    async def send_file(
        self,
        phone: str,
        file_url: str,
        filename: str | None = None,
        caption: str | None = None,
    ) -> SentMessage:
        """Baixa o arquivo e envia como documento.

        O nome informado prevalece; sem ele vale o default `document`
        (o nome da URL não é usado, igual ao comportamento histórico).
        """
        self.ensure_ready()
        recipient_id = normalize_recipient_id(phone)
        fetched = await self._fetcher.fetch(file_url)
        media = fetched.as_media(filename or DEFAULT_FILENAME)
        return await self._dispatch(
            MediaMessage(recipient_id=recipient_id, media=media, caption=caption or "")
        )

    async def send_image(
        self,
        phone: str,
        image_url: str,
        caption: str | None = None,
    ) -> SentMessage:
        """Baixa a imagem e envia com legenda (nome derivado da URL)."""
        self.ensure_ready()
        recipient_id = normalize_recipient_id(phone)
        fetched = await self._fetcher.fetch(image_url)
        return await self._dispatch(
            MediaMessage(recipient_id=recipient_id, media=fetched.as_media(), caption=caption or "")
        )

    async def send_pdf(
        self,
        phone: str,
        html_url: str,
        filename: str | None = None,
        caption: str | None = None,
    ) -> SentMessage:
        """Renderiza a página em PDF e envia como documento."""
        self.ensure_ready()
        recipient_id = normalize_recipient_id(phone)
        document = await self._renderer.render(html_url, filename or None)
        return await self._dispatch(
            MediaMessage(recipient_id=recipient_id, media=document.as_media(), caption=caption or "")
        )

    async def _dispatch(self, message: OutboundMessage) -> SentMessage:
        if isinstance(message, TextMessage):
            message_id = await self._client.send_text(message.recipient_id, message.text)
        else:
            message_id = await self._client.send_media(
                message.recipient_id,
                message.media,
                message.caption,
            )

        extra: dict[str, object] = {"kind": message.kind, "recipient_id": message.recipient_id}
        if isinstance(message, MediaMessage):
            extra["mime_type"] = message.media.mime_type
            extra["size_bytes"] = message.media.size_bytes
        logger.info("message_sent", extra=extra)
        return SentMessage(message_id=message_id, recipient_id=message.recipient_id)
