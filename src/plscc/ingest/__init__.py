"""
Ingestion module - uploaded documents to plain text.
"""

from .document_reader import (
    LEGACY_DOC_ERROR,
    SUPPORTED_EXTENSIONS,
    DocumentReader,
    DocumentText,
    file_extension,
)

__all__ = [
    "LEGACY_DOC_ERROR",
    "SUPPORTED_EXTENSIONS",
    "DocumentReader",
    "DocumentText",
    "file_extension",
]
