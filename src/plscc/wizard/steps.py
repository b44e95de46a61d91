"""
Ordered steps of the PLS Tool wizard.
"""

from enum import Enum
from typing import Optional


class WizardStep(str, Enum):
    SETUP = "setup"
    STAKEHOLDERS = "stakeholders"
    CONSULTATION = "consultation"
    MONITORING = "monitoring"
    ASSESSMENT = "assessment"
    EXPORT = "export"

    @property
    def label(self) -> str:
        return STEP_LABELS[self]

    @property
    def number(self) -> int:
        """1-based position in the wizard."""
        return STEP_ORDER.index(self) + 1


STEP_ORDER: tuple[WizardStep, ...] = tuple(WizardStep)

STEP_LABELS = {
    WizardStep.SETUP: "Context & Setup",
    WizardStep.STAKEHOLDERS: "Stakeholder Mapping",
    WizardStep.CONSULTATION: "Consultation Design",
    WizardStep.MONITORING: "Implementation Tracking",
    WizardStep.ASSESSMENT: "Impact Assessment",
    WizardStep.EXPORT: "Export Report",
}


def next_step(step: WizardStep) -> Optional[WizardStep]:
    """Following step, None on the last one."""
    index = STEP_ORDER.index(step)
    return STEP_ORDER[index + 1] if index + 1 < len(STEP_ORDER) else None


def previous_step(step: WizardStep) -> Optional[WizardStep]:
    """Preceding step, None on the first one."""
    index = STEP_ORDER.index(step)
    return STEP_ORDER[index - 1] if index > 0 else None
