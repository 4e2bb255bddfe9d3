"""Factories de wiring: cliente de sessão, coordenador e use cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.infra.http import create_content_fetcher
from app.infra.pdf import create_pdf_renderer
from app.infra.whatsapp import create_whatsapp_client, print_pairing_qr
from app.sessions import SessionCoordinator
from app.use_cases.pdf import GeneratePdfUseCase
from app.use_cases.whatsapp import SendMessageUseCase
from config.settings import get_whatsapp_settings

if TYPE_CHECKING:
    from app.protocols.content import ContentFetcherProtocol, PdfRendererProtocol
    from app.protocols.messaging_client import MessagingSessionClient


@dataclass(frozen=True, slots=True)
class RelayComponents:
    """Componentes de longa duração montados no startup."""

    client: MessagingSessionClient
    coordinator: SessionCoordinator
    send_message_use_case: SendMessageUseCase
    generate_pdf_use_case: GeneratePdfUseCase


def create_session_coordinator() -> SessionCoordinator:
    """Cria coordenador; imprime QR no terminal se habilitado."""
    on_pairing_code = print_pairing_qr if get_whatsapp_settings().print_qr_to_terminal else None
    return SessionCoordinator(on_pairing_code=on_pairing_code)


def create_components(
    client: MessagingSessionClient | None = None,
    fetcher: ContentFetcherProtocol | None = None,
    renderer: PdfRendererProtocol | None = None,
    coordinator: SessionCoordinator | None = None,
) -> RelayComponents:
    """Monta o grafo de dependências.

    Parâmetros permitem substituir implementações concretas (testes).
    O coordenador é inscrito nos eventos do cliente aqui.
    """
    client = client or create_whatsapp_client()
    coordinator = coordinator or create_session_coordinator()
    fetcher = fetcher or create_content_fetcher()
    renderer = renderer or create_pdf_renderer()

    client.subscribe(coordinator.handle_event)

    return RelayComponents(
        client=client,
        coordinator=coordinator,
        send_message_use_case=SendMessageUseCase(
            client=client,
            coordinator=coordinator,
            fetcher=fetcher,
            renderer=renderer,
        ),
        generate_pdf_use_case=GeneratePdfUseCase(renderer),
    )
