"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ContentFetchError,
    MessageSendError,
    PdfRenderError,
    RelayError,
    SessionNotReadyError,
    UpstreamError,
)

__all__ = [
    "ContentFetchError",
    "MessageSendError",
    "PdfRenderError",
    "RelayError",
    "SessionNotReadyError",
    "UpstreamError",
]
