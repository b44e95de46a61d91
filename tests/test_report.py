"""
Tests for the PLS report (Markdown and HTML).
"""

import sys
from dataclasses import replace
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from plscc.wizard import (
    ConsultationPlan,
    ImpactAssessment,
    LegislationContext,
    MonitoringPlan,
    StakeholderMap,
    WizardState,
    build_report,
)


TODAY = date(2024, 5, 1)


def full_state() -> WizardState:
    monitoring = MonitoringPlan(review_clauses="Review within 3 years").add_item(
        "secondary_legislation", "Emission regulations"
    )
    return WizardState(
        context=LegislationContext(
            country="Kenya",
            jurisdiction="national",
            legislation_title="Clean Air Act",
            legislation_year="2019",
            legislation_summary="Reduces industrial emissions.",
            primary_objectives="• Cut emissions",
        ),
        stakeholders=StakeholderMap().add("Ministry of Environment", "Government Ministry/Agency"),
        consultation=ConsultationPlan(methods=("written", "townhall"), key_questions="Has it worked?"),
        monitoring=monitoring,
        assessment=ImpactAssessment(
            effectiveness_rating=4,
            recommendations="Fund the regulator.",
            evidence_sources=("Audit report 2022",),
        ),
    )


def test_empty_state_report():
    report = build_report(WizardState(), TODAY)
    markdown = report.to_markdown()

    assert report.title == "[Legislation Title]"
    assert [s.number for s in report.sections] == [1, 2, 3, 4, 5, 6]
    assert "No summary provided." in markdown
    assert "No stakeholders identified." in markdown
    assert "No consultation methods specified." in markdown
    assert "No recommendations provided." in markdown
    assert "3/5 (Moderately Effective)" in markdown
    assert "Generated by PLS Command Center • 2024-05-01" in markdown


def test_full_report_markdown():
    report = build_report(full_state(), TODAY)
    markdown = report.to_markdown()

    print(f"\n{markdown}")

    assert report.subtitle == "Kenya • National Parliament • Enacted 2019"
    assert markdown.startswith("# Post-Legislative Scrutiny Report\n\n## Clean Air Act")
    assert "### 1. Background & Objectives" in markdown
    assert "**Primary Objectives:**" in markdown
    assert "- **Ministry of Environment** (Government Ministry/Agency) - No notes" in markdown
    assert "Written Submissions, Town Hall/Public Meeting" in markdown
    assert "- Emission regulations - pending" in markdown
    assert "Review within 3 years" in markdown
    assert "4/5 (Largely Effective)" in markdown
    assert "### 7. Evidence Sources" in markdown
    assert "- Audit report 2022" in markdown


def test_evidence_section_only_when_sources():
    state = full_state()
    state = replace(state, assessment=replace(state.assessment, evidence_sources=()))
    report = build_report(state, TODAY)

    assert report.section(7) is None
    assert report.section(6).title == "Recommendations"


def test_non_national_jurisdiction_shown_verbatim():
    state = WizardState(context=LegislationContext(country="Spain", jurisdiction="regional"))
    assert build_report(state, TODAY).subtitle == "Spain • regional"


def test_html_is_escaped():
    state = WizardState(context=LegislationContext(
        legislation_title="<script>alert('x')</script> Act",
        legislation_summary="Line one\nLine & two",
    ))
    page = build_report(state, TODAY).to_html()

    assert "<script>" not in page
    assert "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt; Act" in page
    assert "Line one<br>\nLine &amp; two" in page
    assert page.startswith("<!DOCTYPE html>")
    assert "<h3>1. Background &amp; Objectives</h3>" in page
    assert 'class="placeholder"' in page
