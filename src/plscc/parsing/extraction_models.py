"""
Extraction Models - the structured record produced by legislation extraction.

Both the pattern extractor and the model-backed extractor return an
ExtractionResult. Attributes are snake_case; the wire form sent to the UI
uses the camelCase keys below plus a "_method" provenance marker:

    {
        "legislationTitle": "...",
        "legislationYear": "1998",
        ...
        "reviewClauses": "",
        "_method": "fallback"
    }
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

from ..models.legislation import LegislationDetails


class ExtractionMethod(str, Enum):
    """Provenance of an ExtractionResult."""

    AI = "ai"                   # Model provider
    FALLBACK = "fallback"       # Pattern extractor


# Attribute name -> wire key
WIRE_KEYS: dict[str, str] = {
    "legislation_title": "legislationTitle",
    "legislation_year": "legislationYear",
    "legislation_summary": "legislationSummary",
    "primary_objectives": "primaryObjectives",
    "implementing_agencies": "implementingAgencies",
    "suggested_country": "suggestedCountry",
    "jurisdiction_level": "jurisdictionLevel",
    "parliament_type": "parliamentType",
    "key_provisions": "keyProvisions",
    "review_clauses": "reviewClauses",
}

METHOD_KEY = "_method"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Legislative metadata extracted from a document.

    Every field is always present and always a string (possibly empty).
    Instances are never mutated; callers merge them into wizard state.
    """

    legislation_title: str = ""
    legislation_year: str = ""
    legislation_summary: str = ""
    primary_objectives: str = ""
    implementing_agencies: str = ""
    suggested_country: str = ""
    jurisdiction_level: str = ""
    parliament_type: str = ""
    key_provisions: str = ""
    review_clauses: str = ""
    method: ExtractionMethod = ExtractionMethod.FALLBACK

    def field_values(self) -> dict[str, str]:
        """Returns the metadata fields (without provenance) keyed by attribute."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "method"}

    def to_dict(self, include_method: bool = True) -> dict[str, str]:
        """Converts to the camelCase wire form."""
        result = {WIRE_KEYS[name]: value for name, value in self.field_values().items()}
        if include_method:
            result[METHOD_KEY] = self.method.value
        return result

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        method: ExtractionMethod = ExtractionMethod.AI,
    ) -> "ExtractionResult":
        """
        Builds a result from a model reply or a wire dict.

        Accepts camelCase or snake_case keys. Values are coerced to strings
        and unknown keys are ignored.

        Args:
            data: Parsed JSON object
            method: Provenance to record

        Returns:
            ExtractionResult with every field populated
        """
        details = LegislationDetails.model_validate(dict(data))
        return cls(method=method, **details.model_dump(by_alias=False))

    def with_method(self, method: ExtractionMethod) -> "ExtractionResult":
        """Returns a copy tagged with another provenance."""
        return ExtractionResult(method=method, **self.field_values())
