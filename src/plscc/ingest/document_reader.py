"""
Reads uploaded legislation into plain text.

PDF and DOCX go through Docling; plain text is decoded directly. The
result is plain text (not markdown) so line-anchored patterns such as
"AN ACT ..." still match at the start of a line.

Usage:
    from plscc.ingest import DocumentReader

    reader = DocumentReader()
    doc = reader.read("clean-air-act.pdf")
    print(doc.char_count, doc.page_count)

    # Upload from the UI
    doc = reader.read_bytes(uploaded.getvalue(), uploaded.name)
"""

import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Any, Optional, Union

from ..errors import DocumentFormatError, DocumentReadError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)


SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".doc", ".txt")

LEGACY_DOC_ERROR = "Legacy .doc format is not fully supported. Please convert to .docx or PDF."


@dataclass
class DocumentText:
    """Text extracted from one document."""

    text: str
    filename: str
    extension: str
    page_count: int = 0

    @property
    def char_count(self) -> int:
        return len(self.text)


def file_extension(filename: str) -> str:
    """Lower-cased extension with the leading dot, "" when absent."""
    return Path(filename).suffix.lower()


class DocumentReader:
    """
    Converts .pdf/.docx/.doc/.txt documents to plain text.

    The Docling converter is created on first use; pass one in to
    reuse it across readers or to substitute it in tests.
    """

    def __init__(self, converter: Optional[Any] = None):
        self._converter = converter

    @property
    def converter(self):
        """Docling converter, created on first access."""
        if self._converter is None:
            from docling.document_converter import DocumentConverter
            self._converter = DocumentConverter()
        return self._converter

    def read(self, path: Union[str, Path]) -> DocumentText:
        """
        Reads a document from disk.

        Raises:
            UnsupportedFileTypeError: extension not supported
            DocumentFormatError: legacy .doc that cannot be converted
            DocumentReadError: conversion failed
        """
        path = Path(path)
        extension = self._check_extension(path.name)

        if extension == ".txt":
            return self._decode_text(path.read_bytes(), path.name)

        return self._convert(str(path), path.name, extension)

    def read_bytes(self, data: bytes, filename: str) -> DocumentText:
        """
        Reads an uploaded document held in memory.

        Raises:
            UnsupportedFileTypeError: extension not supported
            DocumentFormatError: legacy .doc that cannot be converted
            DocumentReadError: conversion failed
        """
        extension = self._check_extension(filename)

        if extension == ".txt":
            return self._decode_text(data, filename)

        from docling.datamodel.base_models import DocumentStream
        source = DocumentStream(name=filename, stream=BytesIO(data))
        return self._convert(source, filename, extension)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _check_extension(self, filename: str) -> str:
        extension = file_extension(filename)
        if extension not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileTypeError(extension or filename)
        return extension

    def _decode_text(self, data: bytes, filename: str) -> DocumentText:
        return DocumentText(
            text=data.decode("utf-8", errors="replace"),
            filename=filename,
            extension=".txt",
        )

    def _convert(self, source: Any, filename: str, extension: str) -> DocumentText:
        try:
            result = self.converter.convert(source)
            document = result.document
            text = document.export_to_text()
            pages = getattr(document, "pages", None) or {}
        except Exception as e:
            if extension == ".doc":
                logger.warning(f"Legacy .doc conversion failed for {filename!r}: {e}")
                raise DocumentFormatError(LEGACY_DOC_ERROR) from e
            logger.error(f"Text extraction failed for {filename!r}: {e}")
            raise DocumentReadError(
                f"Failed to extract text: {e}",
                details={"filename": filename},
            ) from e

        logger.info(f"Extracted {len(text)} chars from {filename!r}")
        return DocumentText(
            text=text,
            filename=filename,
            extension=extension,
            page_count=len(pages),
        )
