"""Router principal do WhatsApp: agrega todos os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.whatsapp.messages import router as messages_router
from api.routes.whatsapp.session import router as session_router

router = APIRouter()

# Estado da sessão (GET) e envio de mensagens (POST)
router.include_router(session_router)
router.include_router(messages_router)
