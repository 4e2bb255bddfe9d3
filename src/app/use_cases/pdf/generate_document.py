"""Use case de geração de PDF avulsa (independe da sessão WhatsApp)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.content import PdfRendererProtocol
    from app.protocols.models import RenderedDocument


class GeneratePdfUseCase:
    """Renderiza uma URL e devolve o documento para download."""

    def __init__(self, renderer: PdfRendererProtocol) -> None:
        self._renderer = renderer

    async def execute(self, html_url: str, filename: str | None = None) -> RenderedDocument:
        # String vazia conta como ausente: vale o nome default do renderer
        return await self._renderer.render(html_url, filename or None)
