"""
Per-step guidance for the PLS Tool wizard.

Call sites depend only on SuggestionProvider. CannedSuggestionProvider
returns fixed guidance personalised with the legislation title and country;
RelaySuggestionProvider asks the PLS Assistant and falls back to the canned
text when the relay fails.

Usage:
    from plscc.wizard import CannedSuggestionProvider, RelaySuggestionProvider

    provider = RelaySuggestionProvider(RelayClient())
    suggestion = provider.suggest("stakeholders", state.context)
    print(suggestion.title, suggestion.content, suggestion.tips)
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .state import LegislationContext
from .steps import WizardStep

logger = logging.getLogger(__name__)


SUGGESTION_SECTIONS = (
    WizardStep.STAKEHOLDERS.value,
    WizardStep.CONSULTATION.value,
    WizardStep.MONITORING.value,
    WizardStep.ASSESSMENT.value,
)


@dataclass(frozen=True)
class Suggestion:
    title: str
    content: str
    tips: tuple[str, ...] = ()


class SuggestionProvider(ABC):
    """Produces guidance for one wizard section."""

    @abstractmethod
    def suggest(self, section: str, context: LegislationContext) -> Suggestion:
        """
        Args:
            section: One of SUGGESTION_SECTIONS
            context: Current legislation context

        Raises:
            ValueError: section has no suggestions
        """


def _check_section(section: str) -> str:
    if section not in SUGGESTION_SECTIONS:
        raise ValueError(f"No suggestions for section: {section!r}")
    return section


# =============================================================================
# CANNED
# =============================================================================

def _stakeholders(context: LegislationContext) -> Suggestion:
    title = context.legislation_title or "your legislation"
    country = context.country or "your jurisdiction"
    return Suggestion(
        title="Suggested Stakeholders",
        content=f"""Based on {title} in {country}:

**Primary Stakeholders to Consider:**
• The ministry or department responsible for implementation
• Frontline staff who will apply the law daily
• Citizens/groups directly affected by the legislation
• Oversight bodies (ombudsman, audit office)

**Secondary Stakeholders:**
• Academic experts in this policy area
• Civil society organizations working on related issues
• Local government implementers
• Professional associations

**Don't Forget:**
• Opposition voices and critics of the legislation
• Groups who may be unintentionally affected
• International comparators or treaty bodies""",
        tips=(
            "Map stakeholders by both influence AND interest - high interest/low influence groups are often overlooked",
            "Consider who was consulted during the original lawmaking - were any voices missing?",
            f"In {context.country or 'your country'}, check if there are statutory consultees for this type of legislation",
        ),
    )


def _consultation(context: LegislationContext) -> Suggestion:
    title = context.legislation_title or "this legislation"
    return Suggestion(
        title="Consultation Strategy Recommendations",
        content=f"""For effective PLS consultation on {title}:

**Method Mix Recommendation:**
1. **Written submissions** for formal evidence from organizations
2. **Online survey** for broader reach
3. **Targeted focus groups** for affected communities
4. **Public hearing** for accountability and visibility

**Key Questions to Ask:**
• Has the legislation achieved its stated objectives?
• What implementation challenges have emerged?
• Are there unintended consequences?
• What would you change if you could?
• How does this compare to expectations when passed?

**Accessibility Considerations:**
• Provide plain language summaries of technical provisions
• Offer multiple response formats (online, paper, oral)
• Allow adequate response time (minimum 4-6 weeks)
• Translate materials if relevant to your jurisdiction""",
        tips=(
            "Remember: passive posting generates few responses. Actively reach out through networks.",
            "Close the feedback loop - tell participants how their input was used",
            "Consider hybrid approaches for those with limited digital access",
        ),
    )


def _monitoring(context: LegislationContext) -> Suggestion:
    title = context.legislation_title or "this legislation"
    return Suggestion(
        title="Implementation Monitoring Framework",
        content=f"""Key monitoring dimensions for {title}:

**Legal Implementation Checklist:**
□ Has all required secondary legislation been enacted?
□ Were statutory deadlines met?
□ Have implementing agencies been established/resourced?
□ Are there legal challenges or judicial interpretations?

**Operational Indicators:**
• Number of beneficiaries/users of the law
• Processing times for applications/decisions
• Complaint rates and resolution times
• Budget allocated vs. spent
• Staff trained and deployed

**Data Sources to Track:**
• Agency annual reports and statistics
• Audit office findings
• Ombudsman complaints data
• Media coverage and investigative reports
• Academic studies and evaluations""",
        tips=(
            "Like France's barometer: track whether regulations were published and when",
            "Set up alerts for when implementing deadlines approach",
            "Create a simple tracking spreadsheet that can be updated regularly",
        ),
    )


def _assessment(context: LegislationContext) -> Suggestion:
    title = context.legislation_title or "this legislation"
    return Suggestion(
        title="Impact Assessment Framework",
        content=f"""Evaluating the impact of {title}:

**Outcome Evaluation Questions:**
1. Did the legislation solve the problem it was meant to address?
2. Who has benefited? Who has been disadvantaged?
3. Were the original cost estimates accurate?
4. What worked well? What didn't work?

**Evidence Quality Hierarchy:**
• Statistical data and official reports (strongest)
• Independent research and evaluations
• Stakeholder testimony and case studies
• Media reports and anecdotal evidence

**Common Pitfalls to Avoid:**
• Confusing outputs (activities done) with outcomes (changes achieved)
• Attribution error - assuming all changes are due to the legislation
• Confirmation bias - only seeking evidence that confirms expectations
• Recency bias - over-weighting recent events""",
        tips=(
            "Wait at least 3-5 years before assessing impact (as Sweden recommends)",
            "Compare outcomes to what was promised in the original impact assessment",
            "Look for unintended consequences - both positive and negative",
        ),
    )


_CANNED = {
    "stakeholders": _stakeholders,
    "consultation": _consultation,
    "monitoring": _monitoring,
    "assessment": _assessment,
}


class CannedSuggestionProvider(SuggestionProvider):
    """
    Fixed guidance per section.

    Attributes:
        delay: Seconds to wait before answering (demo pacing), 0 by default
    """

    def __init__(self, delay: float = 0.0):
        self.delay = delay

    def suggest(self, section: str, context: LegislationContext) -> Suggestion:
        _check_section(section)
        if self.delay > 0:
            time.sleep(self.delay)
        return _CANNED[section](context)


# =============================================================================
# RELAY-BACKED
# =============================================================================

SECTION_QUESTIONS = {
    "stakeholders": "Which stakeholders should we map and consult for the post-legislative scrutiny of this legislation?",
    "consultation": "What consultation methods, key questions and accessibility measures would you recommend for this scrutiny?",
    "monitoring": "What should we monitor to track the implementation of this legislation, and which data sources should we use?",
    "assessment": "How should we assess the impact of this legislation, and what evidence should we look for?",
}


class RelaySuggestionProvider(SuggestionProvider):
    """
    Guidance written by the PLS Assistant.

    The assistant's reply becomes the content; title and tips come from
    the canned suggestion. Any relay failure returns the canned suggestion.

    Attributes:
        relay_client: Object with chat(messages, document_text=None, context=None) -> ChatReply
        fallback: Provider used when the relay fails
    """

    def __init__(self, relay_client, fallback: Optional[SuggestionProvider] = None):
        self.relay_client = relay_client
        self.fallback = fallback or CannedSuggestionProvider()

    def suggest(self, section: str, context: LegislationContext) -> Suggestion:
        _check_section(section)

        reply = self.relay_client.chat(
            [{"role": "user", "content": SECTION_QUESTIONS[section]}],
            context=context.to_dict(),
        )
        if not reply.success or not reply.message:
            logger.warning(f"Assistant suggestions unavailable for {section!r}: {reply.error}")
            return self.fallback.suggest(section, context)

        canned = _CANNED[section](context)
        return Suggestion(title=canned.title, content=reply.message, tips=canned.tips)
