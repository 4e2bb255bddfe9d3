"""Settings do download de conteúdo remoto (imagens e arquivos por URL)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_MIME_TYPE: str = "application/octet-stream"


@dataclass(frozen=True)
class FetchSettings:
    """Configurações do fetcher HTTP.

    Attributes:
        timeout_seconds: Timeout total da requisição (tentativa única)
        default_mime_type: Content-type usado quando a resposta não informa
        verify_ssl: Valida certificados TLS
    """

    timeout_seconds: float = 30.0
    default_mime_type: str = DEFAULT_MIME_TYPE
    verify_ssl: bool = True

    def validate(self) -> list[str]:
        """Valida configurações do fetcher.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.timeout_seconds <= 0:
            errors.append("FETCH_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> FetchSettings:
    """Carrega FetchSettings de variáveis de ambiente."""
    return FetchSettings(
        timeout_seconds=float(os.getenv("FETCH_TIMEOUT_SECONDS", "30")),
        verify_ssl=os.getenv("FETCH_VERIFY_SSL", "true").lower() in ("true", "1"),
    )


@lru_cache(maxsize=1)
def get_fetch_settings() -> FetchSettings:
    """Retorna instância cacheada de FetchSettings."""
    return _load_from_env()
