"""
Wizard state as immutable per-step records.

Each step of the PLS Tool owns one record; every edit returns a new
record, and WizardState is replaced wholesale. Extraction results are
folded in with explicit present-value-wins rules (apply_extraction).

Usage:
    from plscc.wizard import WizardState

    state = WizardState()
    state = state.apply_extraction(response.data)
    state = replace(state, stakeholders=state.stakeholders.add("Ministry of Health"))
"""

import uuid
from dataclasses import dataclass, field, fields, replace
from typing import Any

from ..parsing import ExtractionResult


LEVELS = ("high", "medium", "low")
ITEM_STATUSES = ("pending", "inprogress", "completed", "delayed")

DEFAULT_JURISDICTION = "national"
DEFAULT_RATING = 3

RATING_LABELS = {
    1: "Not Effective",
    2: "Marginally Effective",
    3: "Moderately Effective",
    4: "Largely Effective",
    5: "Highly Effective",
}

# Quadrant name -> (influence, interest); medium levels fall outside the matrix
QUADRANTS = {
    "Key Players": ("high", "high"),
    "Monitor": ("high", "low"),
    "Engage Closely": ("low", "high"),
    "Inform": ("low", "low"),
}


def new_id() -> str:
    return uuid.uuid4().hex


def split_lines(text: str) -> tuple[str, ...]:
    """One entry per non-blank line, trimmed."""
    return tuple(line.strip() for line in (text or "").splitlines() if line.strip())


def merge_present(base, **candidates):
    """
    Returns base with every non-empty candidate value applied.

    Empty strings and None leave the corresponding field untouched.

    Args:
        base: Frozen dataclass record
        **candidates: Field name -> candidate value

    Returns:
        New record of the same type
    """
    present = {name: value for name, value in candidates.items() if value}
    return replace(base, **present) if present else base


# =============================================================================
# STEP 1: CONTEXT
# =============================================================================

@dataclass(frozen=True)
class LegislationContext:
    country: str = ""
    jurisdiction: str = ""
    parliament_type: str = ""
    legislation_title: str = ""
    legislation_year: str = ""
    legislation_summary: str = ""
    primary_objectives: str = ""
    implementing_agencies: str = ""

    def to_dict(self) -> dict[str, str]:
        """camelCase form, as sent to the chat relay."""
        return {
            "country": self.country,
            "jurisdiction": self.jurisdiction,
            "parliamentType": self.parliament_type,
            "legislationTitle": self.legislation_title,
            "legislationYear": self.legislation_year,
            "legislationSummary": self.legislation_summary,
            "primaryObjectives": self.primary_objectives,
            "implementingAgencies": self.implementing_agencies,
        }


# =============================================================================
# STEP 2: STAKEHOLDERS
# =============================================================================

@dataclass(frozen=True)
class Stakeholder:
    name: str
    type: str = ""
    influence: str = "medium"
    interest: str = "medium"
    notes: str = ""
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        if self.influence not in LEVELS:
            raise ValueError(f"Invalid influence level: {self.influence!r}")
        if self.interest not in LEVELS:
            raise ValueError(f"Invalid interest level: {self.interest!r}")


@dataclass(frozen=True)
class StakeholderMap:
    stakeholders: tuple[Stakeholder, ...] = ()

    def __len__(self) -> int:
        return len(self.stakeholders)

    def __iter__(self):
        return iter(self.stakeholders)

    def add(
        self,
        name: str,
        type: str = "",
        influence: str = "medium",
        interest: str = "medium",
        notes: str = "",
    ) -> "StakeholderMap":
        """Appends a stakeholder; a blank name leaves the map unchanged."""
        if not name or not name.strip():
            return self
        stakeholder = Stakeholder(
            name=name.strip(),
            type=type,
            influence=influence,
            interest=interest,
            notes=notes,
        )
        return replace(self, stakeholders=self.stakeholders + (stakeholder,))

    def remove(self, stakeholder_id: str) -> "StakeholderMap":
        return replace(
            self,
            stakeholders=tuple(s for s in self.stakeholders if s.id != stakeholder_id),
        )

    def quadrants(self) -> dict[str, tuple[Stakeholder, ...]]:
        """
        Groups stakeholders on the influence/interest matrix.

        Returns:
            Quadrant name -> stakeholders, in insertion order. Every quadrant
            is present; stakeholders with a medium level are in none.
        """
        return {
            name: tuple(
                s for s in self.stakeholders
                if (s.influence, s.interest) == levels
            )
            for name, levels in QUADRANTS.items()
        }


# =============================================================================
# STEP 3: CONSULTATION
# =============================================================================

@dataclass(frozen=True)
class ConsultationPlan:
    methods: tuple[str, ...] = ()
    target_groups: tuple[str, ...] = ()
    timeline: str = ""
    key_questions: str = ""
    accessibility_measures: str = ""

    def toggle_method(self, method_id: str) -> "ConsultationPlan":
        """Selects the method, or deselects it when already selected."""
        if method_id in self.methods:
            methods = tuple(m for m in self.methods if m != method_id)
        else:
            methods = self.methods + (method_id,)
        return replace(self, methods=methods)


# =============================================================================
# STEP 4: MONITORING
# =============================================================================

@dataclass(frozen=True)
class TrackedItem:
    text: str
    status: str = "pending"
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        if self.status not in ITEM_STATUSES:
            raise ValueError(f"Invalid status: {self.status!r}")


@dataclass(frozen=True)
class MonitoringPlan:
    secondary_legislation: tuple[TrackedItem, ...] = ()
    implementation_milestones: tuple[TrackedItem, ...] = ()
    data_indicators: tuple[TrackedItem, ...] = ()
    review_clauses: str = ""

    ITEM_KINDS = ("secondary_legislation", "implementation_milestones", "data_indicators")

    def _items(self, kind: str) -> tuple[TrackedItem, ...]:
        if kind not in self.ITEM_KINDS:
            raise ValueError(f"Unknown monitoring list: {kind!r}")
        return getattr(self, kind)

    def add_item(self, kind: str, text: str) -> "MonitoringPlan":
        """Appends a pending item; blank text leaves the plan unchanged."""
        items = self._items(kind)
        if not text or not text.strip():
            return self
        return replace(self, **{kind: items + (TrackedItem(text=text.strip()),)})

    def update_status(self, kind: str, item_id: str, status: str) -> "MonitoringPlan":
        items = self._items(kind)
        if status not in ITEM_STATUSES:
            raise ValueError(f"Invalid status: {status!r}")
        updated = tuple(
            replace(item, status=status) if item.id == item_id else item
            for item in items
        )
        return replace(self, **{kind: updated})

    def status_counts(self) -> dict[str, int]:
        """Counts per status over secondary legislation and milestones."""
        counts = {status: 0 for status in ITEM_STATUSES}
        for item in self.secondary_legislation + self.implementation_milestones:
            counts[item.status] += 1
        return counts


# =============================================================================
# STEP 5: ASSESSMENT
# =============================================================================

@dataclass(frozen=True)
class ImpactAssessment:
    intended_outcomes: str = ""
    unintended_consequences: str = ""
    effectiveness_rating: int = DEFAULT_RATING
    recommendations: str = ""
    evidence_sources: tuple[str, ...] = ()

    def __post_init__(self):
        if self.effectiveness_rating not in RATING_LABELS:
            raise ValueError(f"Effectiveness rating must be 1-5, got {self.effectiveness_rating!r}")

    @property
    def effectiveness_label(self) -> str:
        return RATING_LABELS[self.effectiveness_rating]


# =============================================================================
# AGGREGATE
# =============================================================================

@dataclass(frozen=True)
class WizardState:
    context: LegislationContext = field(default_factory=LegislationContext)
    stakeholders: StakeholderMap = field(default_factory=StakeholderMap)
    consultation: ConsultationPlan = field(default_factory=ConsultationPlan)
    monitoring: MonitoringPlan = field(default_factory=MonitoringPlan)
    assessment: ImpactAssessment = field(default_factory=ImpactAssessment)

    def apply_extraction(self, result: ExtractionResult) -> "WizardState":
        """
        Folds an extraction result into the wizard.

        Extracted values win when non-empty, except country: a country the
        user already chose is kept and suggested_country only fills a blank.
        Jurisdiction falls back to "national" when both sides are empty.
        A non-empty review_clauses replaces the monitoring review clauses.

        Args:
            result: Extraction result (AI or fallback)

        Returns:
            New WizardState
        """
        prior = self.context
        context = merge_present(
            prior,
            legislation_title=result.legislation_title,
            legislation_year=result.legislation_year,
            legislation_summary=result.legislation_summary,
            primary_objectives=result.primary_objectives,
            implementing_agencies=result.implementing_agencies,
            parliament_type=result.parliament_type,
        )
        context = replace(
            context,
            country=prior.country or result.suggested_country or "",
            jurisdiction=result.jurisdiction_level or prior.jurisdiction or DEFAULT_JURISDICTION,
        )

        monitoring = merge_present(self.monitoring, review_clauses=result.review_clauses)

        return replace(self, context=context, monitoring=monitoring)

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dict (tuples become lists), for export and debugging."""
        return _to_plain(self)


def _to_plain(value: Any) -> Any:
    if hasattr(value, "__dataclass_fields__"):
        return {f.name: _to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, tuple):
        return [_to_plain(v) for v in value]
    return value

