"""
Extraction module - model-backed legislation extraction with fallback.

Usage:
    from plscc.extract import LegislationExtractor

    extractor = LegislationExtractor(llm_client)
    response = await extractor.extract(text, "act.pdf")
"""

from .ai_extractor import (
    AI_FAILED_WARNING,
    ExtractionConfig,
    ExtractionResponse,
    LegislationExtractor,
    validate_document_text,
)

__all__ = [
    "AI_FAILED_WARNING",
    "ExtractionConfig",
    "ExtractionResponse",
    "LegislationExtractor",
    "validate_document_text",
]
