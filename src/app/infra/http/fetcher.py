"""Download de conteúdo remoto (imagens e arquivos) por URL.

Tentativa única, timeout fixo, sem retry. Qualquer falha de rede,
timeout ou status não-2xx vira ContentFetchError com a mensagem
original, repassada ao cliente da API.
"""

from __future__ import annotations

import logging
import mimetypes
import posixpath
from dataclasses import dataclass, field
from urllib.parse import unquote, urlparse

import httpx

from app.protocols.models import FetchedContent
from config.logging import log_fallback
from config.settings.fetch import DEFAULT_MIME_TYPE, FetchSettings
from utils.errors import ContentFetchError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_mime_type: str = DEFAULT_MIME_TYPE
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    follow_redirects: bool = True

    @classmethod
    def from_settings(cls, settings: FetchSettings) -> HttpClientConfig:
        return cls(
            timeout_seconds=settings.timeout_seconds,
            default_mime_type=settings.default_mime_type,
            verify_ssl=settings.verify_ssl,
        )


class RemoteContentFetcher:
    """Baixa bytes de uma URL HTTP(S) para memória.

    Args:
        config: Configuração HTTP (timeout, headers, TLS)
        transport: Transport httpx opcional (testes usam httpx.MockTransport)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def fetch(self, url: str) -> FetchedContent:
        """Baixa o recurso e devolve conteúdo + content-type.

        Raises:
            ContentFetchError: Falha de rede, timeout ou status não-2xx.
        """
        logger.info("content_fetch_started", extra={"host": urlparse(url).hostname})
        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
                follow_redirects=self._config.follow_redirects,
                headers=self._config.default_headers,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "content_fetch_bad_status",
                extra={"status_code": exc.response.status_code},
            )
            raise ContentFetchError(
                f"Request failed with status code {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.TimeoutException as exc:
            logger.warning("content_fetch_timeout", extra={"timeout_seconds": self._config.timeout_seconds})
            raise ContentFetchError(
                f"timeout of {self._config.timeout_seconds:g}s exceeded"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("content_fetch_failed", extra={"error_type": type(exc).__name__})
            raise ContentFetchError(str(exc) or type(exc).__name__) from exc

        fetched = FetchedContent(
            content=response.content,
            mime_type=self._resolve_mime_type(response, url),
            filename=filename_from_url(str(response.url)),
        )
        logger.info(
            "content_fetched",
            extra={"size_bytes": fetched.size_bytes, "mime_type": fetched.mime_type},
        )
        return fetched

    def _resolve_mime_type(self, response: httpx.Response, url: str) -> str:
        header = response.headers.get("content-type", "")
        mime_type = header.split(";", 1)[0].strip().lower()
        if mime_type:
            return mime_type

        guessed, _ = mimetypes.guess_type(urlparse(url).path)
        log_fallback(
            logger,
            "content_fetcher",
            reason="missing_content_type",
        )
        return guessed or self._config.default_mime_type


def filename_from_url(url: str) -> str | None:
    """Último segmento do path da URL, se houver (`/a/b/foto.jpg` → `foto.jpg`)."""
    path = unquote(urlparse(url).path)
    name = posixpath.basename(path.rstrip("/")) if path else ""
    return name or None


def create_content_fetcher(settings: FetchSettings | None = None) -> RemoteContentFetcher:
    """Factory para criar o fetcher com config de ambiente.

    Args:
        settings: FetchSettings opcional. Se None, carrega do ambiente.
    """
    from config.settings import get_fetch_settings

    return RemoteContentFetcher(HttpClientConfig.from_settings(settings or get_fetch_settings()))
