"""Cliente de sessão WhatsApp Web via Chromium (Playwright).

Mantém um perfil persistente do navegador em `session_dir`: depois do
primeiro pareamento a sessão é restaurada sem novo QR. Um watcher em
background inspeciona a página e traduz o que vê em eventos de ciclo de
vida para os listeners inscritos (ver PagePhaseTracker).

Envios são serializados: a página é única e cada envio navega até a
conversa do destinatário.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from api.normalizers.whatsapp import recipient_digits
from app.infra.whatsapp import dom_selectors as selectors
from app.infra.whatsapp.page_phase import PagePhase, PagePhaseTracker
from config.logging import log_fallback
from config.settings.whatsapp import WhatsAppSettings
from fsm import SessionEvent
from utils.errors import MessageSendError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from playwright.async_api import BrowserContext, Page, Playwright

    from app.protocols.messaging_client import SessionEventListener
    from app.protocols.models import MediaPayload

logger = logging.getLogger(__name__)

PAGE_CLOSED_REASON = "PAGE_CLOSED"
PAGE_CRASHED_REASON = "PAGE_CRASHED"
WATCHER_FAILED_REASON = "WATCHER_FAILED"

INVALID_PHONE_MESSAGE = "Phone number shared via url is invalid"

# Tamanho de janela em que a interface mostra lista + conversa lado a lado
DESKTOP_VIEWPORT = {"width": 1280, "height": 900}


class WhatsAppWebClient:
    """Motor de sessão baseado no WhatsApp Web.

    Args:
        settings: WhatsAppSettings (perfil, navegador, timeouts)
        playwright_factory: Fábrica do Playwright (testes injetam fakes)
    """

    def __init__(
        self,
        settings: WhatsAppSettings | None = None,
        playwright_factory: Callable[[], Any] = async_playwright,
    ) -> None:
        self._settings = settings or WhatsAppSettings()
        self._playwright_factory = playwright_factory
        self._listeners: list[SessionEventListener] = []
        self._tracker = PagePhaseTracker()
        self._send_lock = asyncio.Lock()

        self._playwright: Playwright | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None
        self._watcher: asyncio.Task[None] | None = None
        self._closing = False

    # ──────────────────────────────────────────────────────────────
    # Ciclo de vida
    # ──────────────────────────────────────────────────────────────

    def subscribe(self, listener: SessionEventListener) -> None:
        """Inscreve um listener de eventos (qr, authenticated, ready...)."""
        self._listeners.append(listener)

    async def initialize(self) -> None:
        """Abre o navegador, carrega o WhatsApp Web e inicia o watcher.

        Raises:
            PlaywrightError: Navegador não iniciou ou a página não carregou.
        """
        session_dir = Path(self._settings.session_dir)
        session_dir.mkdir(parents=True, exist_ok=True)
        logger.info(
            "whatsapp_client_starting",
            extra={"session_dir": str(session_dir), "headless": self._settings.headless},
        )

        self._closing = False
        try:
            self._playwright = await self._playwright_factory().start()
            self._context = await self._playwright.chromium.launch_persistent_context(
                user_data_dir=str(session_dir),
                headless=self._settings.headless,
                args=list(self._settings.browser_args),
                executable_path=self._resolve_executable_path(),
                viewport=DESKTOP_VIEWPORT,
            )
            pages = self._context.pages
            self._page = pages[0] if pages else await self._context.new_page()
            self._page.on("close", lambda _page: self._on_page_lost(PAGE_CLOSED_REASON))
            self._page.on("crash", lambda _page: self._on_page_lost(PAGE_CRASHED_REASON))

            await self._page.goto(
                self._settings.web_url,
                wait_until="domcontentloaded",
                timeout=self._settings.startup_timeout_seconds * 1000,
            )
        except Exception:
            logger.exception("whatsapp_client_start_failed")
            await self.close()
            raise

        self._watcher = asyncio.create_task(self._watch_session(), name="whatsapp-session-watcher")
        self._watcher.add_done_callback(self._on_watcher_done)
        logger.info("whatsapp_client_started")

    async def close(self) -> None:
        """Para o watcher e fecha navegador e Playwright (idempotente)."""
        self._closing = True
        if self._watcher is not None:
            self._watcher.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._watcher
            self._watcher = None

        if self._context is not None:
            try:
                await self._context.close()
            except PlaywrightError as exc:
                logger.warning("whatsapp_context_close_failed", extra={"error_type": type(exc).__name__})
            self._context = None
            self._page = None

        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None

    # ──────────────────────────────────────────────────────────────
    # Envio
    # ──────────────────────────────────────────────────────────────

    async def send_text(self, recipient_id: str, text: str) -> str:
        """Envia texto e retorna o id serializado da mensagem."""

        async def compose(page: Page) -> None:
            composer = page.locator(selectors.COMPOSER).first
            await composer.click()
            await composer.fill(text)
            await composer.press("Enter")

        return await self._send(recipient_id, compose, kind="text")

    async def send_media(self, recipient_id: str, media: MediaPayload, caption: str = "") -> str:
        """Anexa a mídia (com legenda) e retorna o id serializado da mensagem."""

        async def compose(page: Page) -> None:
            await page.locator(selectors.ATTACH_BUTTON).first.click()
            file_input = (
                selectors.MEDIA_FILE_INPUT
                if media.mime_type.startswith(("image/", "video/"))
                else selectors.DOCUMENT_FILE_INPUT
            )
            await page.locator(file_input).first.set_input_files(
                files={
                    "name": media.filename,
                    "mimeType": media.mime_type,
                    "buffer": media.content,
                }
            )
            if caption:
                caption_box = page.locator(selectors.CAPTION_INPUT).first
                await caption_box.click()
                await caption_box.fill(caption)
            await page.locator(selectors.SEND_BUTTON).first.click()

        return await self._send(recipient_id, compose, kind="media")

    async def _send(
        self,
        recipient_id: str,
        compose: Callable[[Page], Awaitable[None]],
        kind: str,
    ) -> str:
        page = self._require_page()
        async with self._send_lock:
            try:
                await self._open_chat(page, recipient_id)
                previous_id = await page.evaluate(selectors.LAST_OUTGOING_ID_SCRIPT)
                await compose(page)
                handle = await page.wait_for_function(
                    selectors.NEW_OUTGOING_ID_SCRIPT,
                    arg=previous_id,
                    timeout=self._send_timeout_ms,
                )
                message_id = await handle.json_value()
            except PlaywrightError as exc:
                logger.warning(
                    "whatsapp_send_failed",
                    extra={"kind": kind, "recipient_id": recipient_id, "error_type": type(exc).__name__},
                )
                raise MessageSendError(exc.message or str(exc)) from exc

        logger.info(
            "whatsapp_message_sent",
            extra={"kind": kind, "recipient_id": recipient_id},
        )
        return str(message_id)

    async def _open_chat(self, page: Page, recipient_id: str) -> None:
        """Abre a conversa via /send?phone= e espera o campo de digitação."""
        digits = recipient_digits(recipient_id)
        if not digits:
            raise MessageSendError(INVALID_PHONE_MESSAGE)

        await page.goto(
            self._settings.get_send_url(quote(digits)),
            wait_until="domcontentloaded",
            timeout=self._send_timeout_ms,
        )
        await page.wait_for_selector(
            f"{selectors.COMPOSER}, {selectors.INVALID_PHONE_POPUP}",
            timeout=self._send_timeout_ms,
        )
        if await page.locator(selectors.INVALID_PHONE_POPUP).count():
            raise MessageSendError(INVALID_PHONE_MESSAGE)

    @property
    def _send_timeout_ms(self) -> float:
        return self._settings.send_timeout_seconds * 1000

    def _require_page(self) -> Page:
        if self._page is None or self._page.is_closed():
            raise MessageSendError("WhatsApp Web page is not open")
        return self._page

    # ──────────────────────────────────────────────────────────────
    # Watcher
    # ──────────────────────────────────────────────────────────────

    async def _watch_session(self) -> None:
        while not self._closing:
            snapshot = await self._inspect_page()
            if snapshot is not None:
                phase, code = snapshot
                self._dispatch(self._tracker.update(phase, code))
            await asyncio.sleep(self._settings.qr_poll_interval_seconds)

    async def _inspect_page(self) -> tuple[PagePhase, str | None] | None:
        page = self._page
        if page is None or page.is_closed():
            return None
        try:
            result = await page.evaluate(selectors.DETECT_PHASE_SCRIPT)
        except PlaywrightError as exc:
            # Contexto destruído durante navegação (ex: abertura de conversa)
            logger.debug("whatsapp_page_inspect_skipped", extra={"error_type": type(exc).__name__})
            return None
        return PagePhase(result["phase"]), result.get("code")

    def _on_page_lost(self, reason: str) -> None:
        if self._closing:
            return
        logger.warning("whatsapp_page_lost", extra={"reason": reason})
        self._dispatch(self._tracker.disconnect(reason))

    def _on_watcher_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.critical("whatsapp_session_watcher_crashed", exc_info=exc)
            self._dispatch(self._tracker.disconnect(WATCHER_FAILED_REASON))

    def _dispatch(self, events: list[tuple[SessionEvent, str | None]]) -> None:
        for event, detail in events:
            for listener in self._listeners:
                try:
                    listener(event, detail)
                except Exception:
                    logger.exception("session_listener_failed", extra={"trigger": event.value})

    def _resolve_executable_path(self) -> str | None:
        path = self._settings.executable_path
        if path and not os.path.exists(path):
            log_fallback(logger, "whatsapp_client", reason="executable_not_found")
            return None
        return path


def create_whatsapp_client(settings: WhatsAppSettings | None = None) -> WhatsAppWebClient:
    """Factory para criar o cliente com config de ambiente."""
    from config.settings import get_whatsapp_settings

    return WhatsAppWebClient(settings or get_whatsapp_settings())
