"""Protocolos e contratos do core da aplicação."""

from .content import ContentFetcherProtocol, PdfRendererProtocol
from .messaging_client import MessagingSessionClient, SessionEventListener
from .models import (
    FetchedContent,
    MediaMessage,
    MediaPayload,
    OutboundMessage,
    RenderedDocument,
    SentMessage,
    TextMessage,
)

__all__ = [
    "ContentFetcherProtocol",
    "FetchedContent",
    "MediaMessage",
    "MediaPayload",
    "MessagingSessionClient",
    "OutboundMessage",
    "PdfRendererProtocol",
    "RenderedDocument",
    "SentMessage",
    "SessionEventListener",
    "TextMessage",
]
