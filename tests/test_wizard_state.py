"""
Tests for the wizard records.

Covers apply_extraction merge rules, stakeholder quadrants, consultation
toggling, monitoring items and the effectiveness rating.
"""

import sys
from dataclasses import FrozenInstanceError, replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from plscc.parsing import ExtractionMethod, ExtractionResult
from plscc.wizard import (
    ImpactAssessment,
    LegislationContext,
    MonitoringPlan,
    StakeholderMap,
    WizardState,
    WizardStep,
    merge_present,
    next_step,
    previous_step,
    split_lines,
)


def extraction(**fields) -> ExtractionResult:
    return ExtractionResult(method=ExtractionMethod.AI, **fields)


# =============================================================================
# merge_present / apply_extraction
# =============================================================================

def test_merge_present_ignores_empty_values():
    base = LegislationContext(legislation_title="Old", legislation_year="1999")
    merged = merge_present(base, legislation_title="New", legislation_year="", country=None)

    assert merged.legislation_title == "New"
    assert merged.legislation_year == "1999"
    assert merged.country == ""


def test_merge_present_returns_same_record_when_nothing_present():
    base = LegislationContext(country="Kenya")
    assert merge_present(base, country="") is base


def test_extracted_values_win_when_present():
    state = WizardState(context=LegislationContext(
        legislation_title="User title",
        legislation_year="2001",
        legislation_summary="User summary",
        parliament_type="unicameral",
    ))
    result = extraction(
        legislation_title="Clean Air Act",
        legislation_year="",
        legislation_summary="Model summary",
        primary_objectives="• Cut emissions",
        implementing_agencies="Ministry of Environment",
        parliament_type="",
    )

    ctx = state.apply_extraction(result).context

    assert ctx.legislation_title == "Clean Air Act"
    assert ctx.legislation_year == "2001"
    assert ctx.legislation_summary == "Model summary"
    assert ctx.primary_objectives == "• Cut emissions"
    assert ctx.implementing_agencies == "Ministry of Environment"
    assert ctx.parliament_type == "unicameral"


def test_country_prior_value_wins():
    state = WizardState(context=LegislationContext(country="Uganda"))
    ctx = state.apply_extraction(extraction(suggested_country="Kenya")).context
    assert ctx.country == "Uganda"


def test_suggested_country_fills_blank():
    ctx = WizardState().apply_extraction(extraction(suggested_country="Kenya")).context
    assert ctx.country == "Kenya"


@pytest.mark.parametrize("prior,extracted,expected", [
    ("", "regional", "regional"),
    ("local", "regional", "regional"),
    ("local", "", "local"),
    ("", "", "national"),
])
def test_jurisdiction_rule(prior, extracted, expected):
    state = WizardState(context=LegislationContext(jurisdiction=prior))
    ctx = state.apply_extraction(extraction(jurisdiction_level=extracted)).context
    assert ctx.jurisdiction == expected


def test_review_clauses_replace_monitoring_only_when_present():
    state = WizardState(monitoring=MonitoringPlan(review_clauses="Review after 5 years"))

    unchanged = state.apply_extraction(extraction(review_clauses=""))
    assert unchanged.monitoring.review_clauses == "Review after 5 years"

    replaced = state.apply_extraction(extraction(review_clauses="Sunset in 2030"))
    assert replaced.monitoring.review_clauses == "Sunset in 2030"


def test_apply_extraction_returns_new_state():
    state = WizardState()
    new_state = state.apply_extraction(extraction(legislation_title="Act"))

    assert new_state is not state
    assert state.context.legislation_title == ""
    with pytest.raises(FrozenInstanceError):
        new_state.context.legislation_title = "mutated"


def test_fallback_result_sets_national_jurisdiction():
    from plscc.parsing import extract_legislation_fallback

    result = extract_legislation_fallback("AN ACT: Water Act 2005\nbody", "water.txt")
    ctx = WizardState().apply_extraction(result).context

    assert ctx.legislation_title == "Water Act 2005"
    assert ctx.legislation_year == "2005"
    assert ctx.jurisdiction == "national"
    assert ctx.country == ""


# =============================================================================
# Stakeholders
# =============================================================================

def test_stakeholder_add_and_remove():
    stakeholders = StakeholderMap().add("Ministry of Health", "Government Ministry/Agency", "high", "high")
    stakeholders = stakeholders.add("   ")
    assert len(stakeholders) == 1

    first = stakeholders.stakeholders[0]
    assert first.name == "Ministry of Health"
    assert first.id

    assert len(stakeholders.remove(first.id)) == 0
    assert len(stakeholders.remove("unknown")) == 1


def test_stakeholder_ids_are_unique():
    stakeholders = StakeholderMap().add("A").add("B").add("C")
    assert len({s.id for s in stakeholders}) == 3


def test_stakeholder_quadrants():
    stakeholders = (
        StakeholderMap()
        .add("Ministry", influence="high", interest="high")
        .add("Treasury", influence="high", interest="low")
        .add("Residents", influence="low", interest="high")
        .add("Tourists", influence="low", interest="low")
        .add("Media", influence="medium", interest="high")
    )
    quadrants = stakeholders.quadrants()

    assert list(quadrants) == ["Key Players", "Monitor", "Engage Closely", "Inform"]
    assert [s.name for s in quadrants["Key Players"]] == ["Ministry"]
    assert [s.name for s in quadrants["Monitor"]] == ["Treasury"]
    assert [s.name for s in quadrants["Engage Closely"]] == ["Residents"]
    assert [s.name for s in quadrants["Inform"]] == ["Tourists"]
    assert all("Media" not in [s.name for s in members] for members in quadrants.values())


def test_stakeholder_invalid_level():
    with pytest.raises(ValueError):
        StakeholderMap().add("X", influence="extreme")


# =============================================================================
# Consultation / monitoring / assessment
# =============================================================================

def test_toggle_consultation_method():
    state = WizardState()
    plan = state.consultation.toggle_method("survey").toggle_method("hearing")
    assert plan.methods == ("survey", "hearing")

    plan = plan.toggle_method("survey")
    assert plan.methods == ("hearing",)
    assert state.consultation.methods == ()


def test_monitoring_items_and_counts():
    plan = (
        MonitoringPlan()
        .add_item("secondary_legislation", "Emission regulations")
        .add_item("secondary_legislation", "  ")
        .add_item("implementation_milestones", "Regulator established")
        .add_item("data_indicators", "PM2.5 levels")
    )
    assert len(plan.secondary_legislation) == 1
    assert plan.secondary_legislation[0].status == "pending"

    item = plan.implementation_milestones[0]
    plan = plan.update_status("implementation_milestones", item.id, "completed")

    assert plan.implementation_milestones[0].status == "completed"
    assert plan.implementation_milestones[0].id == item.id
    assert plan.status_counts() == {"pending": 1, "inprogress": 0, "completed": 1, "delayed": 0}


def test_monitoring_rejects_unknown_list_and_status():
    plan = MonitoringPlan().add_item("secondary_legislation", "Regs")
    with pytest.raises(ValueError):
        plan.add_item("budget", "x")
    with pytest.raises(ValueError):
        plan.update_status("secondary_legislation", plan.secondary_legislation[0].id, "done")


@pytest.mark.parametrize("rating,label", [
    (1, "Not Effective"),
    (2, "Marginally Effective"),
    (3, "Moderately Effective"),
    (4, "Largely Effective"),
    (5, "Highly Effective"),
])
def test_effectiveness_labels(rating, label):
    assert ImpactAssessment(effectiveness_rating=rating).effectiveness_label == label


def test_effectiveness_default_and_bounds():
    assert ImpactAssessment().effectiveness_rating == 3
    with pytest.raises(ValueError):
        ImpactAssessment(effectiveness_rating=6)
    with pytest.raises(ValueError):
        replace(ImpactAssessment(), effectiveness_rating=0)


def test_split_lines():
    assert split_lines("  Farmers \n\n Youth groups\n") == ("Farmers", "Youth groups")
    assert split_lines("") == ()


def test_state_to_dict():
    state = WizardState().apply_extraction(extraction(legislation_title="Act"))
    state = replace(state, stakeholders=state.stakeholders.add("Ministry"))
    data = state.to_dict()

    assert data["context"]["legislation_title"] == "Act"
    assert data["stakeholders"]["stakeholders"][0]["name"] == "Ministry"
    assert data["assessment"]["evidence_sources"] == []


# =============================================================================
# Steps
# =============================================================================

def test_step_navigation():
    assert next_step(WizardStep.SETUP) == WizardStep.STAKEHOLDERS
    assert next_step(WizardStep.EXPORT) is None
    assert previous_step(WizardStep.SETUP) is None
    assert previous_step(WizardStep.EXPORT) == WizardStep.ASSESSMENT
    assert WizardStep.MONITORING.label == "Implementation Tracking"
    assert WizardStep.EXPORT.number == 6
