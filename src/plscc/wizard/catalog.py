"""
Fixed option lists for the wizard forms.
"""

from dataclasses import dataclass


STAKEHOLDER_TYPES = (
    "Government Ministry/Agency",
    "Regulatory Body",
    "Civil Society Organization",
    "Academic/Research Institution",
    "Private Sector/Industry",
    "Professional Association",
    "Affected Community Group",
    "Local/Regional Authority",
    "International Organization",
    "Media/Journalists",
    "Legal Practitioners",
    "Other",
)

INFLUENCE_LEVELS = {
    "high": "High - Can significantly shape outcomes",
    "medium": "Medium - Has moderate influence",
    "low": "Low - Limited formal influence",
}

INTEREST_LEVELS = {
    "high": "High - Directly affected or deeply invested",
    "medium": "Medium - Moderately affected or interested",
    "low": "Low - Peripheral interest",
}


@dataclass(frozen=True)
class ConsultationMethod:
    id: str
    label: str
    description: str


CONSULTATION_METHODS = (
    ConsultationMethod("written", "Written Submissions", "Formal written evidence from stakeholders"),
    ConsultationMethod("survey", "Online Survey", "Structured questionnaire for broader reach"),
    ConsultationMethod("hearing", "Public Hearing", "Live testimony from witnesses"),
    ConsultationMethod("forum", "Discussion Forum", "Interactive online discussion platform"),
    ConsultationMethod("focusgroup", "Focus Groups", "In-depth discussions with specific groups"),
    ConsultationMethod("fieldvisit", "Field Visits", "On-site visits to implementing agencies"),
    ConsultationMethod("townhall", "Town Hall/Public Meeting", "Open community engagement sessions"),
    ConsultationMethod("deliberative", "Deliberative Panel", "Representative citizen assembly"),
)

_METHODS_BY_ID = {method.id: method for method in CONSULTATION_METHODS}


def method_label(method_id: str) -> str:
    """Display label for a consultation method id; unknown ids pass through."""
    method = _METHODS_BY_ID.get(method_id)
    return method.label if method else method_id


JURISDICTION_LEVELS = {
    "national": "National/Federal Parliament",
    "regional": "Regional/State Legislature",
    "local": "Local/Municipal Council",
    "supranational": "Supranational Body (e.g., EU)",
}

PARLIAMENT_TYPES = {
    "unicameral": "Unicameral",
    "bicameral": "Bicameral",
    "presidential": "Presidential System Legislature",
    "other": "Other",
}

ITEM_STATUS_LABELS = {
    "pending": "Pending",
    "inprogress": "In Progress",
    "completed": "Completed",
    "delayed": "Delayed",
}
