"""Dependências FastAPI: componentes montados no lifespan (app.state)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from app.use_cases.whatsapp import SendMessageUseCase

if TYPE_CHECKING:
    from app.sessions import SessionCoordinator
    from app.use_cases.pdf import GeneratePdfUseCase


def get_session_coordinator(request: Request) -> SessionCoordinator:
    return request.app.state.session_coordinator


def get_send_message_use_case(request: Request) -> SendMessageUseCase:
    return request.app.state.send_message_use_case


def get_generate_pdf_use_case(request: Request) -> GeneratePdfUseCase:
    return request.app.state.generate_pdf_use_case


async def require_ready_session(
    use_case: SendMessageUseCase = Depends(get_send_message_use_case),
) -> None:
    """Bloqueia envios sem sessão pronta (503).

    Dependência resolvida antes da validação do body: um campo com tipo
    errado também recebe 503 enquanto a sessão não está pronta.
    """
    use_case.ensure_ready()
