"""Modelos transitórios de envio, download e renderização.

Nenhum destes objetos é persistido: são criados por requisição e
descartados após a resposta HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MediaPayload:
    """Conteúdo binário anexado a uma mensagem."""

    content: bytes
    mime_type: str
    filename: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True, slots=True)
class TextMessage:
    """Mensagem de texto simples."""

    recipient_id: str
    text: str

    kind = "text"


@dataclass(frozen=True, slots=True)
class MediaMessage:
    """Mensagem com mídia (imagem, documento, PDF) e legenda opcional."""

    recipient_id: str
    media: MediaPayload
    caption: str = ""

    kind = "media"


OutboundMessage = TextMessage | MediaMessage


@dataclass(frozen=True, slots=True)
class SentMessage:
    """Confirmação de envio devolvida pelo cliente de sessão."""

    message_id: str
    recipient_id: str


@dataclass(frozen=True, slots=True)
class FetchedContent:
    """Resultado do download de uma URL remota."""

    content: bytes
    mime_type: str
    filename: str | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    def as_media(self, filename: str | None = None) -> MediaPayload:
        """Converte em anexo, priorizando o nome informado pelo cliente."""
        return MediaPayload(
            content=self.content,
            mime_type=self.mime_type,
            filename=filename or self.filename or "document",
        )


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    """PDF gerado a partir de uma página HTML."""

    content: bytes
    filename: str

    mime_type = "application/pdf"

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    def as_media(self) -> MediaPayload:
        return MediaPayload(content=self.content, mime_type=self.mime_type, filename=self.filename)
