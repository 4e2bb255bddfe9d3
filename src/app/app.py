"""Entrypoint da aplicação WhatsApp Relay.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3001

Uso (desenvolvimento):
    whatsapp-relay
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router, register_exception_handlers
from app.bootstrap import SERVICE_NAME, initialize_app, validate_runtime_settings
from app.bootstrap.factories import create_components
from app.observability import CorrelationIdMiddleware
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from app.bootstrap.factories import RelayComponents

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def _build_lifespan(components_factory: Callable[[], RelayComponents]):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Gerencia ciclo de vida da aplicação.

        Startup:
        - Valida configurações
        - Monta componentes e inicia a sessão WhatsApp Web

        Shutdown:
        - Fecha navegador da sessão
        """
        logger.info("app_starting", extra={"service_name": SERVICE_NAME})
        validate_runtime_settings()

        components = components_factory()
        app.state.session_coordinator = components.coordinator
        app.state.send_message_use_case = components.send_message_use_case
        app.state.generate_pdf_use_case = components.generate_pdf_use_case

        try:
            await components.client.initialize()
        except Exception:
            # Sem motor de sessão o serviço não tem o que fazer: falha o boot
            logger.critical("session_client_initialization_failed", exc_info=True)
            raise

        yield

        logger.info("app_shutting_down", extra={"service_name": SERVICE_NAME})
        await components.client.close()

    return lifespan


def create_app(
    components_factory: Callable[[], RelayComponents] = create_components,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        components_factory: Monta cliente, coordenador e use cases
            (testes injetam fakes)

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="WhatsApp Relay",
        description="API de envio via sessão WhatsApp Web e geração de PDF",
        version="1.0.0",
        lifespan=_build_lifespan(components_factory),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Serviço atrás de rede confiável: CORS aberto, sem autenticação
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.add_middleware(CorrelationIdMiddleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service_name": SERVICE_NAME})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info(
        "server_starting",
        extra={"host": settings.host, "port": settings.port, "environment": settings.environment},
    )
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
