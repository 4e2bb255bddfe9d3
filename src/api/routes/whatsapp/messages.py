"""Endpoints de envio de mensagens.

Endpoints:
- POST /api/sendText
- POST /api/sendFile
- POST /api/sendImage
- POST /api/sendPdf

Ordem de checagem em todos: sessão pronta (503, dependência do router),
body e campos obrigatórios (400), operação. Erros viram `{"error": msg}`
nos exception handlers.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from api.routes.dependencies import get_send_message_use_case, require_ready_session
from api.routes.schemas import (
    SendFileRequest,
    SendImageRequest,
    SendPdfRequest,
    SendResponse,
    SendTextRequest,
    error_responses,
)
from app.use_cases.whatsapp import SendMessageUseCase

router = APIRouter(dependencies=[Depends(require_ready_session)])

SEND_ERRORS = error_responses(400, 500, 503)


@router.post("/sendText", response_model=SendResponse, responses=SEND_ERRORS)
async def send_text(
    body: SendTextRequest | None = Body(default=None),
    use_case: SendMessageUseCase = Depends(get_send_message_use_case),
) -> SendResponse:
    request = body or SendTextRequest()
    request.require("phone", "text")

    sent = await use_case.send_text(request.phone, request.text)  # type: ignore[arg-type]
    return SendResponse(message_id=sent.message_id)


@router.post("/sendFile", response_model=SendResponse, responses=SEND_ERRORS)
async def send_file(
    body: SendFileRequest | None = Body(default=None),
    use_case: SendMessageUseCase = Depends(get_send_message_use_case),
) -> SendResponse:
    """Baixa `fileUrl` e envia como documento (nome default `document`)."""
    request = body or SendFileRequest()
    request.require("phone", "fileUrl")

    sent = await use_case.send_file(
        request.phone,  # type: ignore[arg-type]
        request.file_url,  # type: ignore[arg-type]
        filename=request.filename,
        caption=request.caption,
    )
    return SendResponse(message_id=sent.message_id)


@router.post("/sendImage", response_model=SendResponse, responses=SEND_ERRORS)
async def send_image(
    body: SendImageRequest | None = Body(default=None),
    use_case: SendMessageUseCase = Depends(get_send_message_use_case),
) -> SendResponse:
    request = body or SendImageRequest()
    request.require("phone", "imageUrl")

    sent = await use_case.send_image(
        request.phone,  # type: ignore[arg-type]
        request.image_url,  # type: ignore[arg-type]
        caption=request.caption,
    )
    return SendResponse(message_id=sent.message_id)


@router.post("/sendPdf", response_model=SendResponse, responses=SEND_ERRORS)
async def send_pdf(
    body: SendPdfRequest | None = Body(default=None),
    use_case: SendMessageUseCase = Depends(get_send_message_use_case),
) -> SendResponse:
    """Renderiza `htmlUrl` em PDF e envia (nome default `document.pdf`)."""
    request = body or SendPdfRequest()
    request.require("phone", "htmlUrl")

    sent = await use_case.send_pdf(
        request.phone,  # type: ignore[arg-type]
        request.html_url,  # type: ignore[arg-type]
        filename=request.filename,
        caption=request.caption,
    )
    return SendResponse(message_id=sent.message_id)
