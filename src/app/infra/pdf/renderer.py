"""Renderização HTML → PDF com Chromium headless (Playwright).

Cada chamada lança um navegador isolado e o fecha antes de retornar,
em sucesso ou falha. Não há pool nem reuso de instâncias.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from app.protocols.models import RenderedDocument
from config.logging import log_fallback
from config.settings.pdf import PdfSettings
from utils.errors import PdfRenderError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from playwright.async_api import Browser, Playwright

logger = logging.getLogger(__name__)

# Margens zeradas: o layout da página controla o espaçamento
ZERO_MARGINS = {"top": "0mm", "bottom": "0mm", "left": "0mm", "right": "0mm"}


class PdfRenderer:
    """Renderiza uma URL em PDF A4 com media `print` emulada.

    Args:
        settings: PdfSettings (binário, viewport, timeout)
        playwright_factory: Fábrica do context manager do Playwright
    """

    def __init__(
        self,
        settings: PdfSettings | None = None,
        playwright_factory: Callable[[], Any] = async_playwright,
    ) -> None:
        self._settings = settings or PdfSettings()
        self._playwright_factory = playwright_factory

    async def render(self, url: str, filename: str | None = None) -> RenderedDocument:
        """Navega até a URL e gera o PDF.

        Args:
            url: Página acessível pelo navegador
            filename: Nome do arquivo resultante (default do settings se None)

        Raises:
            PdfRenderError: Falha de lançamento, navegação (timeout) ou render.
        """
        started_at = time.perf_counter()
        logger.info("pdf_render_started", extra={"target_url": url})
        try:
            async with self._playwright_factory() as playwright:
                async with self._launch_browser(playwright) as browser:
                    content = await self._print_page(browser, url)
        except PlaywrightError as exc:
            logger.warning(
                "pdf_render_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise PdfRenderError(exc.message or str(exc)) from exc

        document = RenderedDocument(
            content=content,
            filename=filename or self._settings.default_filename,
        )
        elapsed_ms = round((time.perf_counter() - started_at) * 1000, 2)
        logger.info(
            "pdf_rendered",
            extra={"size_bytes": document.size_bytes, "elapsed_ms": elapsed_ms},
        )
        return document

    @asynccontextmanager
    async def _launch_browser(self, playwright: Playwright) -> AsyncIterator[Browser]:
        browser = await playwright.chromium.launch(
            headless=True,
            args=list(self._settings.browser_args),
            executable_path=self._resolve_executable_path(),
        )
        try:
            yield browser
        finally:
            await browser.close()

    async def _print_page(self, browser: Browser, url: str) -> bytes:
        page = await browser.new_page(
            viewport={
                "width": self._settings.viewport_width,
                "height": self._settings.viewport_height,
            },
        )
        await page.goto(
            url,
            wait_until="networkidle",
            timeout=self._settings.navigation_timeout_ms,
        )
        # Estilos @media print (ex: .no-print) passam a valer
        await page.emulate_media(media="print")
        return await page.pdf(
            format=self._settings.paper_format,
            print_background=True,
            prefer_css_page_size=False,
            margin=ZERO_MARGINS,
        )

    def _resolve_executable_path(self) -> str | None:
        path = self._settings.executable_path
        if path and not os.path.exists(path):
            log_fallback(logger, "pdf_renderer", reason="executable_not_found")
            return None
        return path


def create_pdf_renderer(settings: PdfSettings | None = None) -> PdfRenderer:
    """Factory para criar o renderer com config de ambiente."""
    from config.settings import get_pdf_settings

    return PdfRenderer(settings or get_pdf_settings())
