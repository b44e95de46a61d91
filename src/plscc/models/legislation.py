"""
Pydantic model for the legislation details returned by the model provider.

The model is asked for a flat JSON object (see llm.prompts). Replies are
validated here before they become an ExtractionResult, so a reply with lists,
numbers or nulls in place of strings still yields a record where every field
is a string.

Usage:
    from plscc.models.legislation import LegislationDetails

    details = LegislationDetails.model_validate(json_from_llm)
    print(details.legislation_title)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


BULLET = "•"


def coerce_to_text(value: Any) -> str:
    """Coerces a JSON value into the string form used by the wizard fields."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        lines = []
        for item in value:
            item_text = coerce_to_text(item).strip()
            if not item_text:
                continue
            if not item_text.startswith(BULLET):
                item_text = f"{BULLET} {item_text}"
            lines.append(item_text)
        return "\n".join(lines)
    return str(value)


class LegislationDetails(BaseModel):
    """Structured legislation metadata, as extracted by the model."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    legislation_title: str = Field(
        default="",
        alias="legislationTitle",
        description="Full official title of the Act/Bill.",
    )
    legislation_year: str = Field(
        default="",
        alias="legislationYear",
        description="Year enacted, e.g. '2023'.",
        examples=["1998", "2023"],
    )
    legislation_summary: str = Field(
        default="",
        alias="legislationSummary",
        description="2-3 sentence summary: problem, remedy, who is affected.",
    )
    primary_objectives: str = Field(
        default="",
        alias="primaryObjectives",
        description="Bulleted list of 3-5 policy objectives.",
    )
    implementing_agencies: str = Field(
        default="",
        alias="implementingAgencies",
        description="Comma-separated government bodies responsible for implementation.",
    )
    suggested_country: str = Field(
        default="",
        alias="suggestedCountry",
        description="Country name if identifiable.",
    )
    jurisdiction_level: str = Field(
        default="",
        alias="jurisdictionLevel",
        description="national/regional/local/supranational.",
        examples=["national", "regional"],
    )
    parliament_type: str = Field(
        default="",
        alias="parliamentType",
        description="unicameral/bicameral/presidential/other or empty.",
    )
    key_provisions: str = Field(
        default="",
        alias="keyProvisions",
        description="Bulleted summary of the 3-5 most important provisions.",
    )
    review_clauses: str = Field(
        default="",
        alias="reviewClauses",
        description="Sunset/review clauses, reporting duties, evaluation timelines.",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> str:
        return coerce_to_text(value)
