"""Protocolos de obtenção de conteúdo: download remoto e render PDF."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import FetchedContent, RenderedDocument


class ContentFetcherProtocol(Protocol):
    """Contrato mínimo para baixar bytes de uma URL."""

    async def fetch(self, url: str) -> FetchedContent: ...


class PdfRendererProtocol(Protocol):
    """Contrato mínimo para renderizar uma URL em PDF."""

    async def render(self, url: str, filename: str | None = None) -> RenderedDocument: ...
