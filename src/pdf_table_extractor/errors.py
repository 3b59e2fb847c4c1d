"""Excepciones del pipeline de extracción."""

from __future__ import annotations


class TableExtractionError(RuntimeError):
    """Base class for failures reported by the extraction pipeline."""


class PageExtractionError(TableExtractionError):
    """Raised when the fragments of one page could not be retrieved."""

    def __init__(self, page_index: int, reason: str = "") -> None:
        self.page_index = page_index
        message = f"No se pudo leer la página {page_index}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DocumentOpenError(TableExtractionError):
    """Raised when the document itself cannot be opened or parsed."""


class EmptyDocumentError(TableExtractionError):
    """Raised when the document has no pages at all."""


class ExtractionCancelledError(TableExtractionError):
    """Raised when extraction is cancelled before starting a page."""

    def __init__(self, page_index: int) -> None:
        self.page_index = page_index
        super().__init__(f"Extracción cancelada antes de la página {page_index}")

