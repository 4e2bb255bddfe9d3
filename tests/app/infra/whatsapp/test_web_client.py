"""Testes para WhatsAppWebClient com Playwright fake."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError

from app.infra.whatsapp import WhatsAppWebClient
from app.infra.whatsapp import dom_selectors as selectors
from app.protocols.models import MediaPayload
from config.settings import WhatsAppSettings
from fsm import SessionEvent
from utils.errors import MessageSendError

RECIPIENT = "5511999998888@c.us"
SENT_ID = "true_5511999998888@c.us_3EB0C767D26A1D5A6B"


class FakePage:
    """Página fake: respostas de evaluate por script e locators por seletor."""

    def __init__(self, phases: list[dict] | None = None) -> None:
        self._phases = list(phases or [{"phase": "chats", "code": None}])
        self.goto = AsyncMock()
        self.wait_for_selector = AsyncMock()
        self.wait_for_function = AsyncMock(
            return_value=SimpleNamespace(json_value=AsyncMock(return_value=SENT_ID))
        )
        self.on = MagicMock()
        self.is_closed = MagicMock(return_value=False)
        self.locators: dict[str, MagicMock] = {}
        self.last_outgoing_id: str | None = "true_5511999998888@c.us_OLD"

    async def evaluate(self, script: str):
        if script == selectors.DETECT_PHASE_SCRIPT:
            return self._phases.pop(0) if len(self._phases) > 1 else self._phases[0]
        if script == selectors.LAST_OUTGOING_ID_SCRIPT:
            return self.last_outgoing_id
        raise AssertionError(f"script inesperado: {script}")

    def locator(self, selector: str) -> MagicMock:
        if selector not in self.locators:
            locator = MagicMock()
            locator.count = AsyncMock(return_value=0)
            locator.first.click = AsyncMock()
            locator.first.fill = AsyncMock()
            locator.first.press = AsyncMock()
            locator.first.set_input_files = AsyncMock()
            self.locators[selector] = locator
        return self.locators[selector]


def _build_playwright(page: FakePage):
    context = MagicMock()
    context.pages = [page]
    context.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch_persistent_context = AsyncMock(return_value=context)
    playwright.stop = AsyncMock()

    manager = MagicMock()
    manager.start = AsyncMock(return_value=playwright)
    return manager, playwright, context


def _client(page: FakePage, tmp_path, **settings) -> tuple[WhatsAppWebClient, MagicMock, MagicMock]:
    manager, playwright, context = _build_playwright(page)
    options = {"session_dir": str(tmp_path / "session"), "qr_poll_interval_seconds": 0.01}
    options.update(settings)
    client = WhatsAppWebClient(WhatsAppSettings(**options), playwright_factory=lambda: manager)
    return client, playwright, context


async def _wait_for(predicate, timeout: float = 1.0) -> None:
    deadline = asyncio.get_running_loop().time() + timeout
    while not predicate():
        if asyncio.get_running_loop().time() > deadline:
            raise AssertionError("condição não atingida")
        await asyncio.sleep(0.01)


class TestLifecycle:
    """initialize/close e emissão de eventos pelo watcher."""

    @pytest.mark.asyncio
    async def test_initialize_opens_persistent_profile(self, tmp_path) -> None:
        page = FakePage()
        client, playwright, context = _client(page, tmp_path)

        await client.initialize()
        await client.close()

        kwargs = playwright.chromium.launch_persistent_context.await_args.kwargs
        assert kwargs["user_data_dir"] == str(tmp_path / "session")
        assert kwargs["headless"] is True
        assert "--no-sandbox" in kwargs["args"]
        assert "--disable-setuid-sandbox" in kwargs["args"]
        assert (tmp_path / "session").is_dir()
        assert page.goto.await_args.args[0] == "https://web.whatsapp.com"
        context.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_initialize_failure_cleans_up_and_raises(self, tmp_path) -> None:
        page = FakePage()
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
        client, playwright, context = _client(page, tmp_path)

        with pytest.raises(PlaywrightError):
            await client.initialize()

        context.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_watcher_emits_pairing_events_in_order(self, tmp_path) -> None:
        page = FakePage(
            phases=[
                {"phase": "loading", "code": None},
                {"phase": "qr", "code": "2@abc"},
                {"phase": "loading", "code": None},
                {"phase": "chats", "code": None},
            ]
        )
        client, _, _ = _client(page, tmp_path)
        events: list[tuple[SessionEvent, str | None]] = []
        client.subscribe(lambda event, detail: events.append((event, detail)))

        await client.initialize()
        try:
            await _wait_for(lambda: len(events) >= 3)
        finally:
            await client.close()

        assert events == [
            (SessionEvent.QR_ISSUED, "2@abc"),
            (SessionEvent.AUTHENTICATED, None),
            (SessionEvent.READY, None),
        ]

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_stop_others(self, tmp_path) -> None:
        client, _, _ = _client(FakePage(), tmp_path)
        received: list[SessionEvent] = []
        client.subscribe(MagicMock(side_effect=RuntimeError("boom")))
        client.subscribe(lambda event, detail: received.append(event))

        await client.initialize()
        try:
            await _wait_for(lambda: SessionEvent.READY in received)
        finally:
            await client.close()

        assert received == [SessionEvent.AUTHENTICATED, SessionEvent.READY]

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, tmp_path) -> None:
        client, playwright, _ = _client(FakePage(), tmp_path)
        await client.initialize()

        await client.close()
        await client.close()

        playwright.stop.assert_awaited_once()


class TestSend:
    """Envio via /send?phone= na página única."""

    @pytest.mark.asyncio
    async def test_send_text_returns_new_message_id(self, tmp_path) -> None:
        page = FakePage()
        client, _, _ = _client(page, tmp_path, qr_poll_interval_seconds=60)
        await client.initialize()
        try:
            message_id = await client.send_text(RECIPIENT, "Olá")
        finally:
            await client.close()

        assert message_id == SENT_ID
        page.goto.assert_any_await(
            "https://web.whatsapp.com/send?phone=5511999998888",
            wait_until="domcontentloaded",
            timeout=60000.0,
        )
        composer = page.locators[selectors.COMPOSER].first
        composer.fill.assert_awaited_once_with("Olá")
        composer.press.assert_awaited_once_with("Enter")
        assert page.wait_for_function.await_args.kwargs["arg"] == "true_5511999998888@c.us_OLD"

    @pytest.mark.asyncio
    async def test_send_image_uses_media_input_and_caption(self, tmp_path) -> None:
        page = FakePage()
        client, _, _ = _client(page, tmp_path, qr_poll_interval_seconds=60)
        media = MediaPayload(content=b"\x89PNG", mime_type="image/png", filename="photo.png")
        await client.initialize()
        try:
            message_id = await client.send_media(RECIPIENT, media, caption="Veja")
        finally:
            await client.close()

        assert message_id == SENT_ID
        page.locators[selectors.MEDIA_FILE_INPUT].first.set_input_files.assert_awaited_once_with(
            files={"name": "photo.png", "mimeType": "image/png", "buffer": b"\x89PNG"}
        )
        page.locators[selectors.CAPTION_INPUT].first.fill.assert_awaited_once_with("Veja")
        page.locators[selectors.SEND_BUTTON].first.click.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_send_document_without_caption(self, tmp_path) -> None:
        page = FakePage()
        client, _, _ = _client(page, tmp_path, qr_poll_interval_seconds=60)
        media = MediaPayload(content=b"%PDF", mime_type="application/pdf", filename="document.pdf")
        await client.initialize()
        try:
            await client.send_media(RECIPIENT, media)
        finally:
            await client.close()

        page.locators[selectors.DOCUMENT_FILE_INPUT].first.set_input_files.assert_awaited_once()
        assert selectors.CAPTION_INPUT not in page.locators

    @pytest.mark.asyncio
    async def test_invalid_phone_popup_raises(self, tmp_path) -> None:
        page = FakePage()
        page.locator(selectors.INVALID_PHONE_POPUP).count = AsyncMock(return_value=1)
        client, _, _ = _client(page, tmp_path, qr_poll_interval_seconds=60)
        await client.initialize()
        try:
            with pytest.raises(MessageSendError, match="invalid"):
                await client.send_text("123@c.us", "oi")
        finally:
            await client.close()

        page.wait_for_function.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_recipient_without_digits_raises_send_error(self, tmp_path) -> None:
        """Telefone só com formatação ("+") vira "@c.us": nada é navegado."""
        page = FakePage()
        client, _, _ = _client(page, tmp_path, qr_poll_interval_seconds=60)
        await client.initialize()
        try:
            with pytest.raises(MessageSendError, match="Phone number shared via url is invalid"):
                await client.send_text("@c.us", "oi")
        finally:
            await client.close()

        assert page.goto.await_count == 1
        page.wait_for_function.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_playwright_failure_becomes_send_error(self, tmp_path) -> None:
        page = FakePage()
        page.wait_for_function.side_effect = PlaywrightError("Timeout 60000ms exceeded.")
        client, _, _ = _client(page, tmp_path, qr_poll_interval_seconds=60)
        await client.initialize()
        try:
            with pytest.raises(MessageSendError, match="Timeout 60000ms exceeded"):
                await client.send_text(RECIPIENT, "oi")
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_send_before_initialize_raises(self, tmp_path) -> None:
        client, _, _ = _client(FakePage(), tmp_path)
        with pytest.raises(MessageSendError):
            await client.send_text(RECIPIENT, "oi")
