"""Agregador de rotas: registra todos os routers da API.

Este módulo é responsável por criar o router principal da API
e incluir os sub-routers (WhatsApp, PDF e health).

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.pdf.router import router as pdf_router
from api.routes.whatsapp.router import router as whatsapp_router

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health check (sem prefixo, /health na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Sessão e envio WhatsApp
    api_router.include_router(whatsapp_router, prefix=API_PREFIX, tags=["whatsapp"])

    # Geração de PDF avulsa
    api_router.include_router(pdf_router, prefix=API_PREFIX, tags=["pdf"])

    return api_router
