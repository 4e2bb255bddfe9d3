"""Renderização de páginas HTML em PDF."""

from app.infra.pdf.renderer import PdfRenderer, create_pdf_renderer

__all__ = [
    "PdfRenderer",
    "create_pdf_renderer",
]
