"""
Post-Legislative Scrutiny report compiled from the wizard state.

build_report() turns a WizardState into a ScrutinyReport made of numbered
sections; the report renders to Markdown or to a standalone HTML page
(all user text HTML-escaped).

Usage:
    from plscc.wizard import build_report

    report = build_report(state, date.today())
    Path("pls_report.html").write_text(report.to_html(), encoding="utf-8")
"""

import html
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .catalog import method_label
from .state import WizardState


REPORT_HEADING = "Post-Legislative Scrutiny Report"
TITLE_PLACEHOLDER = "[Legislation Title]"
FOOTER = "Generated by PLS Command Center"


@dataclass(frozen=True)
class ReportItem:
    text: str
    lead: str = ""      # rendered bold before the text


@dataclass(frozen=True)
class ReportBlock:
    label: str = ""
    text: str = ""
    items: tuple[ReportItem, ...] = ()
    placeholder: bool = False   # italic note shown when a section is empty


@dataclass(frozen=True)
class ReportSection:
    number: int
    title: str
    blocks: tuple[ReportBlock, ...]

    @property
    def heading(self) -> str:
        return f"{self.number}. {self.title}"


@dataclass(frozen=True)
class ScrutinyReport:
    title: str
    subtitle: str
    sections: tuple[ReportSection, ...]
    generated_on: date

    @property
    def footer(self) -> str:
        return f"{FOOTER} • {self.generated_on.isoformat()}"

    def section(self, number: int) -> Optional[ReportSection]:
        for section in self.sections:
            if section.number == number:
                return section
        return None

    def to_markdown(self) -> str:
        lines = [f"# {REPORT_HEADING}", "", f"## {self.title}"]
        if self.subtitle:
            lines += ["", self.subtitle]

        for section in self.sections:
            lines += ["", f"### {section.heading}"]
            for block in section.blocks:
                lines.append("")
                if block.label:
                    lines.append(f"**{block.label}**")
                if block.text:
                    lines.append(f"*{block.text}*" if block.placeholder else block.text)
                for item in block.items:
                    lead = f"**{item.lead}** " if item.lead else ""
                    lines.append(f"- {lead}{item.text}")

        lines += ["", "---", "", self.footer, ""]
        return "\n".join(lines)

    def to_html(self) -> str:
        parts = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{_escape(REPORT_HEADING)} - {_escape(self.title)}</title>",
            f"<style>{_STYLE}</style>",
            "</head>",
            "<body>",
            "<header>",
            f"<h1>{_escape(REPORT_HEADING)}</h1>",
            f"<h2>{_escape(self.title)}</h2>",
        ]
        if self.subtitle:
            parts.append(f'<p class="subtitle">{_escape(self.subtitle)}</p>')
        parts.append("</header>")

        for section in self.sections:
            parts.append("<section>")
            parts.append(f"<h3>{_escape(section.heading)}</h3>")
            for block in section.blocks:
                if block.label:
                    parts.append(f"<strong>{_escape(block.label)}</strong>")
                if block.text:
                    css = ' class="placeholder"' if block.placeholder else ""
                    parts.append(f"<p{css}>{_escape_multiline(block.text)}</p>")
                if block.items:
                    parts.append("<ul>")
                    for item in block.items:
                        lead = f"<strong>{_escape(item.lead)}</strong> " if item.lead else ""
                        parts.append(f"<li>{lead}{_escape(item.text)}</li>")
                    parts.append("</ul>")
            parts.append("</section>")

        parts += [
            f"<footer>{_escape(self.footer)}</footer>",
            "</body>",
            "</html>",
        ]
        return "\n".join(parts)


_STYLE = (
    "body{font-family:sans-serif;max-width:800px;margin:2em auto;color:#0f172a}"
    "header{border-bottom:2px solid #e2e8f0;margin-bottom:1.5em}"
    "h3{border-bottom:1px solid #e2e8f0}"
    ".subtitle{color:#64748b}"
    ".placeholder{color:#64748b;font-style:italic}"
    "footer{margin-top:2em;text-align:center;color:#64748b;font-size:small}"
)


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


def _escape_multiline(text: str) -> str:
    return "<br>\n".join(_escape(line) for line in text.split("\n"))


# =============================================================================
# BUILDER
# =============================================================================

def _subtitle(state: WizardState) -> str:
    ctx = state.context
    jurisdiction = "National Parliament" if ctx.jurisdiction == "national" else ctx.jurisdiction
    year = f"Enacted {ctx.legislation_year}" if ctx.legislation_year else ""
    return " • ".join(part for part in (ctx.country, jurisdiction, year) if part)


def _background(state: WizardState) -> ReportSection:
    ctx = state.context
    blocks = [
        ReportBlock(text=ctx.legislation_summary)
        if ctx.legislation_summary
        else ReportBlock(text="No summary provided.", placeholder=True)
    ]
    if ctx.primary_objectives:
        blocks.append(ReportBlock(label="Primary Objectives:", text=ctx.primary_objectives))
    return ReportSection(1, "Background & Objectives", tuple(blocks))


def _stakeholders(state: WizardState) -> ReportSection:
    if not len(state.stakeholders):
        blocks = (ReportBlock(text="No stakeholders identified.", placeholder=True),)
    else:
        items = tuple(
            ReportItem(lead=s.name, text=f"({s.type or 'Unspecified'}) - {s.notes or 'No notes'}")
            for s in state.stakeholders
        )
        blocks = (ReportBlock(items=items),)
    return ReportSection(2, "Stakeholders Consulted", blocks)


def _consultation(state: WizardState) -> ReportSection:
    plan = state.consultation
    if not plan.methods:
        blocks = (ReportBlock(text="No consultation methods specified.", placeholder=True),)
    else:
        blocks = [
            ReportBlock(label="Methods used:", text=", ".join(method_label(m) for m in plan.methods)),
        ]
        if plan.target_groups:
            blocks.append(ReportBlock(label="Target Groups:", text=", ".join(plan.target_groups)))
        if plan.key_questions:
            blocks.append(ReportBlock(label="Key Questions:", text=plan.key_questions))
        blocks = tuple(blocks)
    return ReportSection(3, "Consultation Approach", blocks)


def _implementation(state: WizardState) -> ReportSection:
    plan = state.monitoring
    blocks = []
    if plan.secondary_legislation:
        blocks.append(ReportBlock(
            label="Secondary Legislation:",
            items=tuple(ReportItem(f"{i.text} - {i.status}") for i in plan.secondary_legislation),
        ))
    if plan.implementation_milestones:
        blocks.append(ReportBlock(
            label="Implementation Milestones:",
            items=tuple(ReportItem(f"{i.text} - {i.status}") for i in plan.implementation_milestones),
        ))
    if plan.review_clauses:
        blocks.append(ReportBlock(label="Review Clauses:", text=plan.review_clauses))
    if not blocks:
        blocks.append(ReportBlock(text="No implementation data recorded.", placeholder=True))
    return ReportSection(4, "Implementation Status", tuple(blocks))


def _impact(state: WizardState) -> ReportSection:
    assessment = state.assessment
    blocks = [
        ReportBlock(
            label="Effectiveness Rating:",
            text=f"{assessment.effectiveness_rating}/5 ({assessment.effectiveness_label})",
        ),
    ]
    if assessment.intended_outcomes:
        blocks.append(ReportBlock(label="Intended Outcomes:", text=assessment.intended_outcomes))
    if assessment.unintended_consequences:
        blocks.append(ReportBlock(label="Unintended Consequences:", text=assessment.unintended_consequences))
    return ReportSection(5, "Impact Assessment", tuple(blocks))


def _recommendations(state: WizardState) -> ReportSection:
    text = state.assessment.recommendations
    block = ReportBlock(text=text) if text else ReportBlock(text="No recommendations provided.", placeholder=True)
    return ReportSection(6, "Recommendations", (block,))


def build_report(state: WizardState, generated_on: Optional[date] = None) -> ScrutinyReport:
    """
    Compiles the wizard state into a report.

    Args:
        state: Current wizard state
        generated_on: Date printed in the footer (today when omitted)

    Returns:
        ScrutinyReport with sections 1-6, plus 7 (Evidence Sources) when
        evidence sources were recorded
    """
    sections = [
        _background(state),
        _stakeholders(state),
        _consultation(state),
        _implementation(state),
        _impact(state),
        _recommendations(state),
    ]
    sources = state.assessment.evidence_sources
    if sources:
        sections.append(ReportSection(
            7, "Evidence Sources",
            (ReportBlock(items=tuple(ReportItem(s) for s in sources)),),
        ))

    return ScrutinyReport(
        title=state.context.legislation_title or TITLE_PLACEHOLDER,
        subtitle=_subtitle(state),
        sections=tuple(sections),
        generated_on=generated_on or date.today(),
    )
