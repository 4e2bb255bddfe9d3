"""Settings do renderizador HTML → PDF.

O navegador é lançado por requisição; estes valores definem o binário,
a viewport A4 e o timeout de navegação.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_EXECUTABLE_PATH: str = "/usr/bin/chromium"

# A4 (210mm x 297mm) a 96 DPI
A4_VIEWPORT_WIDTH: int = 794
A4_VIEWPORT_HEIGHT: int = 1123

PDF_BROWSER_ARGS: tuple[str, ...] = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
)


@dataclass(frozen=True)
class PdfSettings:
    """Configurações de renderização PDF.

    Attributes:
        executable_path: Binário do Chromium usado na renderização
        browser_args: Flags de linha de comando do Chromium
        viewport_width: Largura da viewport em pixels
        viewport_height: Altura da viewport em pixels
        navigation_timeout_seconds: Timeout da navegação até rede ociosa
        paper_format: Formato de página do PDF
        default_filename: Nome de arquivo quando o cliente não informa
    """

    executable_path: str | None = DEFAULT_EXECUTABLE_PATH
    browser_args: tuple[str, ...] = PDF_BROWSER_ARGS
    viewport_width: int = A4_VIEWPORT_WIDTH
    viewport_height: int = A4_VIEWPORT_HEIGHT
    navigation_timeout_seconds: float = 30.0
    paper_format: str = "A4"
    default_filename: str = "document.pdf"

    @property
    def navigation_timeout_ms(self) -> float:
        """Timeout de navegação em milissegundos (unidade do Playwright)."""
        return self.navigation_timeout_seconds * 1000

    def validate(self) -> list[str]:
        """Valida configurações de renderização.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.navigation_timeout_seconds <= 0:
            errors.append("PDF_NAVIGATION_TIMEOUT_SECONDS deve ser > 0")

        if self.viewport_width <= 0 or self.viewport_height <= 0:
            errors.append("Viewport PDF deve ter dimensões positivas")

        return errors


def _load_from_env() -> PdfSettings:
    """Carrega PdfSettings de variáveis de ambiente."""
    executable_path = (
        os.getenv("BROWSER_EXECUTABLE_PATH", "")
        or os.getenv("PUPPETEER_EXECUTABLE_PATH", "")
        or DEFAULT_EXECUTABLE_PATH
    )
    return PdfSettings(
        executable_path=executable_path,
        navigation_timeout_seconds=float(
            os.getenv("PDF_NAVIGATION_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_pdf_settings() -> PdfSettings:
    """Retorna instância cacheada de PdfSettings."""
    return _load_from_env()
