"""
Tests for the wizard suggestion providers.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from plscc.chat import ChatReply
from plscc.wizard import (
    SUGGESTION_SECTIONS,
    CannedSuggestionProvider,
    LegislationContext,
    RelaySuggestionProvider,
    SuggestionProvider,
)


CONTEXT = LegislationContext(legislation_title="Clean Air Act", country="Kenya")


class FakeRelayClient:
    def __init__(self, reply: ChatReply):
        self.reply = reply
        self.calls = []

    def chat(self, messages, document_text=None, context=None):
        self.calls.append({"messages": messages, "context": context})
        return self.reply


@pytest.mark.parametrize("section", SUGGESTION_SECTIONS)
def test_canned_suggestion_per_section(section):
    suggestion = CannedSuggestionProvider().suggest(section, CONTEXT)

    assert suggestion.title
    assert "Clean Air Act" in suggestion.content
    assert len(suggestion.tips) == 3


def test_canned_personalisation_defaults():
    suggestion = CannedSuggestionProvider().suggest("stakeholders", LegislationContext())
    assert suggestion.content.startswith("Based on your legislation in your jurisdiction:")
    assert "In your country, check" in suggestion.tips[2]


def test_canned_stakeholders_mentions_country():
    suggestion = CannedSuggestionProvider().suggest("stakeholders", CONTEXT)
    assert suggestion.content.startswith("Based on Clean Air Act in Kenya:")


def test_unknown_section():
    with pytest.raises(ValueError):
        CannedSuggestionProvider().suggest("export", CONTEXT)


def test_relay_suggestion_uses_assistant_reply():
    client = FakeRelayClient(ChatReply.ok("Consult the Ministry of Environment."))
    provider = RelaySuggestionProvider(client)

    suggestion = provider.suggest("stakeholders", CONTEXT)

    assert isinstance(provider, SuggestionProvider)
    assert suggestion.content == "Consult the Ministry of Environment."
    assert suggestion.title == "Suggested Stakeholders"
    assert client.calls[0]["context"]["legislationTitle"] == "Clean Air Act"
    assert client.calls[0]["messages"][0]["role"] == "user"


def test_relay_suggestion_falls_back_to_canned():
    client = FakeRelayClient(ChatReply.failed("Unable to connect"))
    provider = RelaySuggestionProvider(client)

    suggestion = provider.suggest("monitoring", CONTEXT)
    assert suggestion == CannedSuggestionProvider().suggest("monitoring", CONTEXT)
