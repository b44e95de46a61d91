"""
Tests for the LegislationPatternExtractor.

Covers:
- totality and idempotence
- year rule (digit-adjacency)
- title from filename and "AN ACT:" override
- summary span and first-paragraph fallback
- objectives block
- agency deduplication and cap
- defaults and constant fields
- the Clean Air Act scenario
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from plscc.parsing import (
    ExtractionMethod,
    LegislationPatternExtractor,
    PatternConfig,
    extract_legislation_fallback,
)


DEFAULTS = PatternConfig()

CLEAN_AIR = (
    "THE CLEAN AIR ACT\n\nPurpose: to reduce emissions by 2030.\n\n"
    "The Ministry of Environment shall enforce this Act."
)


# =============================================================================
# Totality / idempotence
# =============================================================================

@pytest.mark.parametrize("text", [
    "",
    "no digits here at all",
    "x" * 5000,
    "Purpose:\n" + "word " * 2000,
    "\n\n\n",
    "{[(•-)]}\\",
    None,
])
def test_extract_is_total(text):
    result = extract_legislation_fallback(text, "act.txt")

    assert result.method == ExtractionMethod.FALLBACK
    for name, value in result.field_values().items():
        assert isinstance(value, str), name
    assert result.legislation_summary
    assert result.primary_objectives
    assert result.implementing_agencies
    assert result.jurisdiction_level == "national"


def test_extract_is_idempotent():
    extractor = LegislationPatternExtractor()

    first = extractor.extract(CLEAN_AIR, "clean-air.txt")
    second = extractor.extract(CLEAN_AIR, "clean-air.txt")

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_missing_filename_defaults_to_document_txt():
    result = extract_legislation_fallback("short text")
    assert result.legislation_title == "Document"


# =============================================================================
# Year
# =============================================================================

def test_year_first_match():
    result = extract_legislation_fallback("The law was enacted in 1998 under the reform of 2004.")
    assert result.legislation_year == "1998"


def test_year_followed_by_letter_counts():
    result = extract_legislation_fallback("in room 1999A")
    assert result.legislation_year == "1999"


def test_year_inside_longer_number_ignored():
    assert extract_legislation_fallback("reference 12019 and 20190").legislation_year == ""
    assert extract_legislation_fallback("ref 12019 then 2021").legislation_year == "2021"


def test_no_year():
    assert extract_legislation_fallback("No year is mentioned, only 1850 and 2150.").legislation_year == ""


# =============================================================================
# Title
# =============================================================================

def test_title_from_filename():
    extractor = LegislationPatternExtractor()
    result = extractor.extract("nothing relevant", "community-empowermentAct.txt")
    assert result.legislation_title == "Community Empowerment Act"


@pytest.mark.parametrize("filename,expected", [
    ("clean_air.pdf", "Clean Air"),
    ("FREEDOM-of-INFORMATION.docx", "Freedom Of Information"),
    ("dataProtectionBill.doc", "Data Protection Bill"),
    ("archive.v2.txt", "Archive.v2"),
])
def test_title_from_filename_variants(filename, expected):
    assert LegislationPatternExtractor().title_from_filename(filename) == expected


def test_title_override_from_text():
    text = "Preamble line\nAN ACT: The Data Protection Act\nSection 1 ..."
    result = extract_legislation_fallback(text, "whatever-name.pdf")
    assert result.legislation_title == "The Data Protection Act"


@pytest.mark.parametrize("line,expected", [
    ("A BILL for the Regulation of Trade", "for the Regulation of Trade"),
    ("title: Water Services Act", "Water Services Act"),
    ("An Act to amend the Police Act", "to amend the Police Act"),
])
def test_title_override_variants(line, expected):
    assert extract_legislation_fallback(f"{line}\nbody", "x.txt").legislation_title == expected


def test_title_override_needs_line_start():
    result = extract_legislation_fallback("This is AN ACT: Hidden Title", "visible-title.txt")
    assert result.legislation_title == "Visible Title"


# =============================================================================
# Summary
# =============================================================================

def test_summary_from_purpose_section():
    body = (
        "This Act provides for the establishment of an independent regulator "
        "responsible for overseeing water quality standards across all regions."
    )
    text = f"WATER ACT\n\nPurpose:\n{body}\n\nSection 2"
    result = extract_legislation_fallback(text, "water.txt")
    assert result.legislation_summary == body


def test_summary_is_capped_at_300_chars():
    body = ("lengthy words describing the purpose " * 13).strip()
    text = f"Summary: {body}\n\nNext"
    result = extract_legislation_fallback(text, "x.txt")
    assert len(result.legislation_summary) == 300


WATER_PURPOSE = (
    "This Act provides for the establishment of an independent regulator "
    "responsible for overseeing water quality standards across all regions."
)


def test_summary_stops_at_line_opening_with_uppercase():
    text = f"Purpose:\n{WATER_PURPOSE}\nSection 2 defines the regulator."
    result = extract_legislation_fallback(text, "water.txt")
    assert result.legislation_summary == WATER_PURPOSE


def test_summary_runs_past_line_opening_with_lowercase():
    text = f"Purpose:\n{WATER_PURPOSE}\nsection 2 defines the regulator.\n\nSchedule"
    result = extract_legislation_fallback(text, "water.txt")
    assert result.legislation_summary == f"{WATER_PURPOSE} section 2 defines the regulator."


def test_summary_first_paragraph_fallback():
    text = "An introduction   spread\nover lines\n\nSecond paragraph"
    result = extract_legislation_fallback(text, "x.txt")
    assert result.legislation_summary == "An introduction spread over lines"


# =============================================================================
# Objectives
# =============================================================================

def test_objectives_block():
    text = "Intro\nObjectives:\n- Reduce emissions\n- Improve health\n(c) Report yearly\nEnd of list"
    result = extract_legislation_fallback(text, "x.txt")
    assert result.primary_objectives == "- Reduce emissions\n- Improve health\n(c) Report yearly"


@pytest.mark.parametrize("text,expected", [
    ("Objectives:\n• Reduce emissions\n• Improve health\nEnd", "• Reduce emissions\n• Improve health"),
    ("Aims\n1. Protect rivers\n2. Restore wetlands\nSchedule", "1. Protect rivers\n2. Restore wetlands"),
])
def test_objectives_bullet_and_numbered_blocks(text, expected):
    assert extract_legislation_fallback(text, "x.txt").primary_objectives == expected


def test_objectives_placeholder():
    result = extract_legislation_fallback("Nothing to see here.", "x.txt")
    assert result.primary_objectives == DEFAULTS.default_objectives


# =============================================================================
# Agencies
# =============================================================================

def test_agencies_dedup_and_cap():
    text = "\n".join([
        "Ministry of Health",
        "Department of Transport",
        "Ministry of Health",
        "Revenue Authority",
        "Electoral Commission",
        "Ministry of Health",
        "Parole Board",
        "Office of the Auditor",
    ])
    result = extract_legislation_fallback(text, "x.txt")
    agencies = result.implementing_agencies.split(", ")

    assert agencies == [
        "Ministry of Health",
        "Department of Transport",
        "Authority",
        "Commission",
        "Board",
    ]
    assert len(set(agencies)) == len(agencies)


def test_agency_stops_at_comma():
    result = extract_legislation_fallback("The Ministry of Finance, acting alone", "x.txt")
    assert result.implementing_agencies == "Ministry of Finance"


# =============================================================================
# Defaults
# =============================================================================

def test_defaults_for_unrecognised_text():
    text = ("Lorem ipsum dolor sit amet " * 8)[:200]
    result = extract_legislation_fallback(text, "lorem.txt")

    assert result.legislation_summary
    assert result.primary_objectives == DEFAULTS.default_objectives
    assert result.implementing_agencies == "Relevant government ministries and agencies"
    assert result.suggested_country == ""
    assert result.parliament_type == ""
    assert result.key_provisions == ""
    assert result.review_clauses == ""
    assert result.jurisdiction_level == "national"


def test_empty_text_gets_default_summary():
    result = extract_legislation_fallback("", "x.txt")
    assert result.legislation_summary == DEFAULTS.default_summary


def test_custom_config():
    config = PatternConfig(max_agencies=2, default_agencies="None listed")
    extractor = LegislationPatternExtractor(config)

    result = extractor.extract("Board A\nBoard B\nBoard C", "x.txt")
    assert result.implementing_agencies == "Board A, Board B"
    assert extractor.extract("nothing", "x.txt").implementing_agencies == "None listed"


# =============================================================================
# Scenario
# =============================================================================

def test_clean_air_scenario():
    result = extract_legislation_fallback(CLEAN_AIR, "clean-air.txt")

    print(f"\n[OK] {result.to_dict()}")

    assert result.legislation_year == "2030"
    assert result.legislation_title == "Clean Air"
    assert "Ministry of Environment" in result.implementing_agencies
    assert result.legislation_summary == "THE CLEAN AIR ACT"
    assert result.to_dict()["_method"] == "fallback"
