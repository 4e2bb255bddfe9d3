"""Exceções de domínio do relay: sessão indisponível e falhas upstream."""

from __future__ import annotations


class RelayError(RuntimeError):
    """Base para falhas tratadas pela camada HTTP."""


class SessionNotReadyError(RelayError):
    """Sessão WhatsApp ainda não autenticada/pronta para envio."""

    def __init__(self, message: str = "WhatsApp session is not connected") -> None:
        super().__init__(message)


class UpstreamError(RelayError):
    """Falha de um motor externo (HTTP remoto, Chromium, WhatsApp Web).

    A mensagem é repassada ao cliente da API sem alteração.
    """


class ContentFetchError(UpstreamError):
    """Falha ao baixar conteúdo remoto (rede, timeout ou status não-2xx)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PdfRenderError(UpstreamError):
    """Falha ao navegar ou rasterizar a página em PDF."""


class MessageSendError(UpstreamError):
    """Falha do cliente de sessão ao entregar a mensagem."""
