"""Settings específicas de WhatsApp.

Configurações da sessão WhatsApp Web automatizada via Chromium headless.
Cada componente deve ter seu próprio arquivo de settings para isolamento.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

WHATSAPP_WEB_URL: str = "https://web.whatsapp.com"

# Sufixo de usuário do protocolo (chat individual)
RECIPIENT_SUFFIX: str = "@c.us"

# Flags para rodar Chromium dentro de container já isolado
DEFAULT_BROWSER_ARGS: tuple[str, ...] = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
)


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações da sessão WhatsApp Web.

    Attributes:
        session_dir: Diretório do perfil do navegador (credenciais da sessão)
        web_url: URL do WhatsApp Web
        headless: Executa Chromium sem interface
        browser_args: Flags de linha de comando do Chromium
        executable_path: Binário do Chromium (None = bundled do Playwright)
        qr_poll_interval_seconds: Intervalo de inspeção do estado da página
        startup_timeout_seconds: Timeout da navegação inicial
        send_timeout_seconds: Timeout para confirmação de envio
        print_qr_to_terminal: Imprime QR code no terminal ao recebê-lo
    """

    session_dir: str = "./whatsapp-session"
    web_url: str = WHATSAPP_WEB_URL
    headless: bool = True
    browser_args: tuple[str, ...] = DEFAULT_BROWSER_ARGS
    executable_path: str | None = None

    qr_poll_interval_seconds: float = 2.0
    startup_timeout_seconds: float = 120.0
    send_timeout_seconds: float = 60.0

    print_qr_to_terminal: bool = True

    def get_send_url(self, phone_digits: str) -> str:
        """Retorna URL que abre o chat de um número.

        Args:
            phone_digits: Número apenas com dígitos (sem sufixo)

        Returns:
            URL no formato: https://web.whatsapp.com/send?phone={digits}
        """
        if not phone_digits:
            raise ValueError("phone_digits é obrigatório")
        return f"{self.web_url}/send?phone={phone_digits}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de WhatsApp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.session_dir:
            errors.append("WHATSAPP_SESSION_DIR não configurado")

        if self.qr_poll_interval_seconds <= 0:
            errors.append("WHATSAPP_QR_POLL_INTERVAL_SECONDS deve ser > 0")

        if self.send_timeout_seconds <= 0:
            errors.append("WHATSAPP_SEND_TIMEOUT_SECONDS deve ser > 0")

        if self.executable_path and not os.path.exists(self.executable_path):
            errors.append(f"WHATSAPP_BROWSER_EXECUTABLE_PATH inexistente: {self.executable_path}")

        return errors


def _parse_bool(raw: str, default: bool) -> bool:
    if not raw:
        return default
    return raw.lower() in ("true", "1", "yes")


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    extra_args = os.getenv("WHATSAPP_BROWSER_EXTRA_ARGS", "").split()
    return WhatsAppSettings(
        session_dir=os.getenv("WHATSAPP_SESSION_DIR", "./whatsapp-session"),
        web_url=os.getenv("WHATSAPP_WEB_URL", WHATSAPP_WEB_URL).rstrip("/"),
        headless=_parse_bool(os.getenv("WHATSAPP_HEADLESS", ""), True),
        browser_args=DEFAULT_BROWSER_ARGS + tuple(extra_args),
        executable_path=os.getenv("WHATSAPP_BROWSER_EXECUTABLE_PATH") or None,
        qr_poll_interval_seconds=float(
            os.getenv("WHATSAPP_QR_POLL_INTERVAL_SECONDS", "2")
        ),
        startup_timeout_seconds=float(
            os.getenv("WHATSAPP_STARTUP_TIMEOUT_SECONDS", "120")
        ),
        send_timeout_seconds=float(os.getenv("WHATSAPP_SEND_TIMEOUT_SECONDS", "60")),
        print_qr_to_terminal=_parse_bool(os.getenv("WHATSAPP_PRINT_QR", ""), True),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
