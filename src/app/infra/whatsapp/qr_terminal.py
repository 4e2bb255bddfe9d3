"""Impressão do código de pareamento como QR no terminal."""

from __future__ import annotations

import sys
from typing import TextIO

import qrcode
from qrcode.constants import ERROR_CORRECT_L

SCAN_HINT = "QR code received, scan it with WhatsApp (Linked devices):"


def print_pairing_qr(code: str, stream: TextIO | None = None) -> None:
    """Renderiza o código em ASCII no stream (stdout por padrão)."""
    out = stream or sys.stdout
    qr = qrcode.QRCode(border=1, error_correction=ERROR_CORRECT_L)
    qr.add_data(code)
    qr.make(fit=True)

    out.write(f"{SCAN_HINT}\n")
    qr.print_ascii(out=out, invert=True)
    out.flush()
