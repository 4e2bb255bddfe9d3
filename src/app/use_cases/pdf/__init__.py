"""Use cases de documentos PDF."""

from .generate_document import GeneratePdfUseCase

__all__ = ["GeneratePdfUseCase"]
