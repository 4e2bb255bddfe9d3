"""Endpoint de geração de PDF avulsa.

- POST /api/generatePdf: renderiza `htmlUrl` e devolve os bytes do PDF
  como anexo. Não depende da sessão WhatsApp.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Response

from api.routes.dependencies import get_generate_pdf_use_case
from api.routes.schemas import GeneratePdfRequest, error_responses
from app.use_cases.pdf import GeneratePdfUseCase

router = APIRouter()


@router.post(
    "/generatePdf",
    response_class=Response,
    responses=error_responses(400, 500),
)
async def generate_pdf(
    body: GeneratePdfRequest | None = Body(default=None),
    use_case: GeneratePdfUseCase = Depends(get_generate_pdf_use_case),
) -> Response:
    request = body or GeneratePdfRequest()
    request.require("htmlUrl")

    document = await use_case.execute(request.html_url, request.filename)  # type: ignore[arg-type]
    return Response(
        content=document.content,
        media_type=document.mime_type,
        headers={"Content-Disposition": content_disposition(document.filename)},
    )


def content_disposition(filename: str) -> str:
    """Header de anexo; aspas no nome são removidas para não quebrar o header."""
    safe_name = filename.replace('"', "")
    return f'attachment; filename="{safe_name}"'
