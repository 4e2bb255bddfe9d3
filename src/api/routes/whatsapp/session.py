"""Endpoints de estado da sessão WhatsApp.

Endpoints:
- GET /api/status: sessão pronta + existência de QR pendente
- GET /api/qr: código de pareamento pendente (se houver)

Somente leitura do snapshot atual; nunca falham.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from api.routes.dependencies import get_session_coordinator
from api.routes.schemas import StatusResponse
from app.sessions import SessionCoordinator

router = APIRouter()


@router.get("/status", response_model=StatusResponse)
async def session_status(
    coordinator: SessionCoordinator = Depends(get_session_coordinator),
) -> StatusResponse:
    snapshot = coordinator.snapshot()
    return StatusResponse(
        status="ready" if snapshot.ready else "not_ready",
        qr_code=snapshot.has_pairing_code,
    )


@router.get("/qr")
async def pairing_code(
    coordinator: SessionCoordinator = Depends(get_session_coordinator),
) -> dict[str, Any]:
    """Retorna o QR pendente para pareamento manual.

    Sessão pronta tem precedência sobre um QR eventualmente guardado.
    """
    snapshot = coordinator.snapshot()
    if snapshot.ready:
        return {"status": "already_connected"}
    if snapshot.pending_pairing_code:
        return {"qr": snapshot.pending_pairing_code}
    return {"status": "waiting_for_qr"}
