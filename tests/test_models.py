"""
Tests for LegislationDetails (coercion of model reply values).
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from plscc.models import LegislationDetails, coerce_to_text


@pytest.mark.parametrize("value,expected", [
    (None, ""),
    ("plain", "plain"),
    (2019, "2019"),
    (["Cut emissions", "• Protect health", "", None], "• Cut emissions\n• Protect health"),
    ({"a": 1}, "{'a': 1}"),
])
def test_coerce_to_text(value, expected):
    assert coerce_to_text(value) == expected


def test_details_from_camel_case_reply():
    details = LegislationDetails.model_validate({
        "legislationTitle": "Clean Air Act",
        "legislationYear": 2019,
        "primaryObjectives": ["Cut emissions", "Protect health"],
        "parliamentType": None,
        "confidence": 0.9,
    })

    assert details.legislation_title == "Clean Air Act"
    assert details.legislation_year == "2019"
    assert details.primary_objectives == "• Cut emissions\n• Protect health"
    assert details.parliament_type == ""
    assert details.review_clauses == ""


def test_details_accept_snake_case():
    details = LegislationDetails.model_validate({"legislation_title": "Water Act"})
    assert details.legislation_title == "Water Act"
