"""Cliente HTTP de saída: download de conteúdo remoto."""

from app.infra.http.fetcher import (
    HttpClientConfig,
    RemoteContentFetcher,
    create_content_fetcher,
    filename_from_url,
)

__all__ = [
    "HttpClientConfig",
    "RemoteContentFetcher",
    "create_content_fetcher",
    "filename_from_url",
]
