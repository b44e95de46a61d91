"""
Parsing module - Regex-first extraction of legislative metadata.

Usage:
    from plscc.parsing import extract_legislation_fallback

    result = extract_legislation_fallback(text, "clean-air-act.txt")
    print(result.legislation_title, result.legislation_year)
"""

from .extraction_models import (
    ExtractionMethod,
    ExtractionResult,
    WIRE_KEYS,
    METHOD_KEY,
)
from .legislation_patterns import (
    LegislationPatternExtractor,
    PatternConfig,
    DEFAULT_FILENAME,
    extract_legislation_fallback,
)

__all__ = [
    # Models
    "ExtractionMethod",
    "ExtractionResult",
    "WIRE_KEYS",
    "METHOD_KEY",
    # Extractor
    "LegislationPatternExtractor",
    "PatternConfig",
    "DEFAULT_FILENAME",
    "extract_legislation_fallback",
]
