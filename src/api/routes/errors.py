"""Mapeamento de exceções para respostas HTTP `{"error": msg}`.

- ValidationError / body inválido → 400
- SessionNotReadyError → 503
- UpstreamError (download, render, envio) → 500, mensagem repassada
- Qualquer outra exceção → 500 com a mensagem da exceção
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.validators.whatsapp import ValidationError
from utils.errors import SessionNotReadyError, UpstreamError

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info(
        "request_rejected",
        extra={"path": request.url.path, "missing_fields": list(exc.missing_fields)},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def _handle_request_validation_error(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    logger.info(
        "request_body_invalid",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


async def _handle_not_ready(request: Request, exc: SessionNotReadyError) -> JSONResponse:
    logger.warning("session_not_ready", extra={"path": request.url.path})
    return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))


async def _handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.warning(
        "upstream_failed",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_failed", extra={"path": request.url.path})
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Registra os handlers de erro no app."""
    app.add_exception_handler(ValidationError, _handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(SessionNotReadyError, _handle_not_ready)  # type: ignore[arg-type]
    app.add_exception_handler(UpstreamError, _handle_upstream_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _handle_unexpected_error)
