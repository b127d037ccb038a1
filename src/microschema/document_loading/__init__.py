"""Document loading exports."""

from .document_loader import DocumentError, compile_document, load_document

__all__ = [
    "DocumentError",
    "compile_document",
    "load_document",
]
