"""
LegislationPatternExtractor - Regex-only extraction of legislative metadata.

Used whenever model-backed extraction is unavailable, misconfigured or
fails. Pure and total: local, synchronous, deterministic string processing
that returns a fully populated ExtractionResult for any input string.

Steps (independent, in order):
    1. Title:      filename-derived, overridden by an "AN ACT:"/"TITLE:" line
    2. Year:       first 19xx/20xx four-digit run
    3. Summary:    purpose/summary/overview span, else first paragraph
    4. Objectives: bulleted block after objectives/aims/purposes
    5. Agencies:   up to 5 distinct ministry/agency/authority phrases

English legislative phrasing only.
"""

import re
import logging
from dataclasses import dataclass
from typing import Optional

from .extraction_models import ExtractionMethod, ExtractionResult

logger = logging.getLogger(__name__)


DEFAULT_FILENAME = "document.txt"


@dataclass(frozen=True)
class PatternConfig:
    """Extractor defaults and limits."""

    default_summary: str = (
        "This legislation establishes a framework for governance in its designated policy area."
    )
    default_objectives: str = (
        "• To be extracted from the document\n"
        "• Review the full text for specific objectives"
    )
    default_agencies: str = "Relevant government ministries and agencies"
    default_jurisdiction: str = "national"

    summary_max_chars: int = 300
    first_paragraph_window: int = 500
    max_agencies: int = 5


class LegislationPatternExtractor:
    """
    Deterministic extractor for legislative documents.

    Usage:
        extractor = LegislationPatternExtractor()
        result = extractor.extract(text, "clean-air-act.pdf")

        print(result.legislation_title)
        print(result.to_dict())
    """

    # =========================================================================
    # REGEX PATTERNS
    # =========================================================================

    # Title line: "AN ACT: ...", "A BILL ...", "TITLE: ..." at start of text or line
    PATTERN_TITLE = re.compile(
        r'(?:^|\n)(?:AN? (?:ACT|BILL|LAW)|TITLE)[:\s]+([^\n]+)',
        re.IGNORECASE
    )

    # Year: 19xx/20xx not adjacent to other digits ("1999A" counts, "12019" does not)
    PATTERN_YEAR = re.compile(r'(?<![0-9])(?:19|20)[0-9]{2}(?![0-9])')

    # Summary: keyword, optional ":"/whitespace and newline, then 100-500 chars
    # up to a blank line or a newline followed by an uppercase letter
    PATTERN_SUMMARY = re.compile(
        r'(?:purpose|summary|overview|objects?)[:\s]*\n?([\s\S]{100,500}?)(?:\n\n|\n(?-i:[A-Z]))',
        re.IGNORECASE
    )

    # Objectives: keyword then consecutive lines opening with •, -, a digit or "("
    PATTERN_OBJECTIVES = re.compile(
        r'(?:objectives?|aims?|purposes?)[:\s]*\n?((?:[•\-\d(][^\n]+\n?)+)',
        re.IGNORECASE
    )

    # Agencies: keyword plus up to 50 non-comma, non-newline characters
    PATTERN_AGENCY = re.compile(
        r'(?:minister|ministry|department|agency|authority|commission|board|office)[^,\n]{0,50}',
        re.IGNORECASE
    )

    PATTERN_EXTENSION = re.compile(r'\.[^/.]+$')
    PATTERN_SEPARATORS = re.compile(r'[-_]')
    PATTERN_CAMEL_CASE = re.compile(r'([a-z])([A-Z])')
    PATTERN_WHITESPACE = re.compile(r'\s+')

    def __init__(self, config: Optional[PatternConfig] = None):
        self.config = config or PatternConfig()

    def extract(self, text: str, filename: Optional[str] = None) -> ExtractionResult:
        """
        Extracts legislative metadata from raw document text.

        The caller is responsible for the minimum-length check; any string,
        including an empty one, yields a complete result.

        Args:
            text: Raw document text
            filename: Original file name (default: "document.txt")

        Returns:
            ExtractionResult tagged as fallback
        """
        text = text or ""
        filename = filename or DEFAULT_FILENAME

        result = ExtractionResult(
            legislation_title=self._extract_title(text, filename),
            legislation_year=self._extract_year(text),
            legislation_summary=self._extract_summary(text) or self.config.default_summary,
            primary_objectives=self._extract_objectives(text) or self.config.default_objectives,
            implementing_agencies=self._extract_agencies(text) or self.config.default_agencies,
            suggested_country="",
            jurisdiction_level=self.config.default_jurisdiction,
            parliament_type="",
            key_provisions="",
            review_clauses="",
            method=ExtractionMethod.FALLBACK,
        )

        logger.debug(
            f"Pattern extraction: title={result.legislation_title!r}, "
            f"year={result.legislation_year!r}, chars={len(text)}"
        )
        return result

    # =========================================================================
    # STEPS
    # =========================================================================

    def title_from_filename(self, filename: str) -> str:
        """'community-empowermentAct.txt' -> 'Community Empowerment Act'."""
        stem = self.PATTERN_EXTENSION.sub('', filename)
        stem = self.PATTERN_SEPARATORS.sub(' ', stem)
        stem = self.PATTERN_CAMEL_CASE.sub(r'\1 \2', stem)
        return ' '.join(word[:1].upper() + word[1:].lower() for word in stem.split(' '))

    def _extract_title(self, text: str, filename: str) -> str:
        match = self.PATTERN_TITLE.search(text)
        if match:
            return match.group(1).strip()
        return self.title_from_filename(filename)

    def _extract_year(self, text: str) -> str:
        match = self.PATTERN_YEAR.search(text)
        return match.group(0) if match else ""

    def _extract_summary(self, text: str) -> str:
        match = self.PATTERN_SUMMARY.search(text)
        if match:
            summary = self._collapse_whitespace(match.group(1))
            return summary[:self.config.summary_max_chars]

        # First paragraph of the opening window, uncapped
        window = text[:self.config.first_paragraph_window]
        first_paragraph = window.split('\n\n', 1)[0]
        return self._collapse_whitespace(first_paragraph)

    def _extract_objectives(self, text: str) -> str:
        match = self.PATTERN_OBJECTIVES.search(text)
        return match.group(1).strip() if match else ""

    def _extract_agencies(self, text: str) -> str:
        agencies: list[str] = []
        for match in self.PATTERN_AGENCY.finditer(text):
            agency = match.group(0).strip()
            if agency not in agencies:
                agencies.append(agency)
            if len(agencies) == self.config.max_agencies:
                break
        return ', '.join(agencies)

    def _collapse_whitespace(self, value: str) -> str:
        return self.PATTERN_WHITESPACE.sub(' ', value).strip()


_default_extractor = LegislationPatternExtractor()


def extract_legislation_fallback(text: str, filename: Optional[str] = None) -> ExtractionResult:
    """
    Shortcut for LegislationPatternExtractor().extract().

    Shared by the relay server and the client-side fallback.
    """
    return _default_extractor.extract(text, filename)
