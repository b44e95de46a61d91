"""
Wizard module - PLS Tool state, steps, guidance and report.

Usage:
    from plscc.wizard import WizardState, build_report

    state = WizardState().apply_extraction(result)
    print(build_report(state).to_markdown())
"""

# State
from .state import (
    ITEM_STATUSES,
    LEVELS,
    QUADRANTS,
    RATING_LABELS,
    ConsultationPlan,
    ImpactAssessment,
    LegislationContext,
    MonitoringPlan,
    Stakeholder,
    StakeholderMap,
    TrackedItem,
    WizardState,
    merge_present,
    split_lines,
)

# Steps and catalogs
from .steps import STEP_ORDER, WizardStep, next_step, previous_step
from .catalog import (
    CONSULTATION_METHODS,
    INFLUENCE_LEVELS,
    INTEREST_LEVELS,
    ITEM_STATUS_LABELS,
    JURISDICTION_LEVELS,
    PARLIAMENT_TYPES,
    STAKEHOLDER_TYPES,
    ConsultationMethod,
    method_label,
)

# Guidance
from .suggestions import (
    SUGGESTION_SECTIONS,
    CannedSuggestionProvider,
    RelaySuggestionProvider,
    Suggestion,
    SuggestionProvider,
)

# Report
from .report import ScrutinyReport, build_report

__all__ = [
    # State
    "ITEM_STATUSES",
    "LEVELS",
    "QUADRANTS",
    "RATING_LABELS",
    "ConsultationPlan",
    "ImpactAssessment",
    "LegislationContext",
    "MonitoringPlan",
    "Stakeholder",
    "StakeholderMap",
    "TrackedItem",
    "WizardState",
    "merge_present",
    "split_lines",
    # Steps and catalogs
    "STEP_ORDER",
    "WizardStep",
    "next_step",
    "previous_step",
    "CONSULTATION_METHODS",
    "INFLUENCE_LEVELS",
    "INTEREST_LEVELS",
    "ITEM_STATUS_LABELS",
    "JURISDICTION_LEVELS",
    "PARLIAMENT_TYPES",
    "STAKEHOLDER_TYPES",
    "ConsultationMethod",
    "method_label",
    # Guidance
    "SUGGESTION_SECTIONS",
    "CannedSuggestionProvider",
    "RelaySuggestionProvider",
    "Suggestion",
    "SuggestionProvider",
    # Report
    "ScrutinyReport",
    "build_report",
]
