"""
Chat relay for the PLS Assistant.

Forwards the accumulated conversation to the model under the assistant
persona, with the supporting document and the user's legislation context
appended to the system instruction. Failures come back as an unsuccessful
ChatReply so the UI can show an apology bubble instead of crashing.

Usage:
    from plscc.chat import ChatRelay, ChatTurn

    relay = ChatRelay(llm_client)
    reply = await relay.reply([ChatTurn("user", "What is PLS?")])
    print(reply.message if reply.success else reply.error)
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from ..errors import CredentialMissingError, UpstreamServiceError
from ..llm.anthropic_client import AnthropicClient
from ..llm.prompts import PLS_ASSISTANT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


NOT_CONFIGURED_ERROR = "AI not configured. Please set ANTHROPIC_API_KEY in your .env file."
SERVICE_ERROR = "AI service error. Please try again."
NO_USER_MESSAGE_ERROR = "At least one user message is required"

NOT_SPECIFIED = "Not specified"


# =============================================================================
# MODELS
# =============================================================================

@dataclass(frozen=True)
class ChatTurn:
    """One message of the conversation."""

    role: str       # "user" | "assistant"
    content: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ChatTurn":
        return cls(role=str(data.get("role", "user")), content=str(data.get("content") or ""))

    def to_upstream(self) -> dict[str, str]:
        """Anything other than "assistant" is sent as "user"."""
        role = "assistant" if self.role == "assistant" else "user"
        return {"role": role, "content": self.content}


@dataclass(frozen=True)
class ChatContext:
    """Legislation context rendered into the system instruction."""

    legislation_title: str = ""
    country: str = ""
    legislation_year: str = ""
    jurisdiction: str = ""
    parliament_type: str = ""

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ChatContext":
        """Accepts camelCase (UI) or snake_case keys; extra keys are ignored."""
        data = data or {}

        def pick(snake: str, camel: str) -> str:
            value = data.get(camel, data.get(snake))
            return str(value) if value else ""

        return cls(
            legislation_title=pick("legislation_title", "legislationTitle"),
            country=pick("country", "country"),
            legislation_year=pick("legislation_year", "legislationYear"),
            jurisdiction=pick("jurisdiction", "jurisdiction"),
            parliament_type=pick("parliament_type", "parliamentType"),
        )


@dataclass
class ChatReply:
    """Envelope for one assistant reply."""

    success: bool
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, message: str) -> "ChatReply":
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, error: str) -> "ChatReply":
        return cls(success=False, error=error)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChatReply":
        return cls(
            success=bool(data.get("success")),
            message=data.get("message"),
            error=data.get("error"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success}
        if self.message is not None:
            result["message"] = self.message
        if self.error is not None:
            result["error"] = self.error
        return result


TurnLike = Union[ChatTurn, Mapping[str, Any]]


# =============================================================================
# PROMPT
# =============================================================================

def build_system_prompt(
    document_text: Optional[str] = None,
    context: Optional[ChatContext] = None,
    document_limit: int = 20000,
) -> str:
    """
    Persona prompt plus the supporting document and legislation context.

    Args:
        document_text: Supporting document, capped at document_limit chars
        context: Legislation context, rendered only when it has a title
        document_limit: Max document characters

    Returns:
        System instruction
    """
    prompt = PLS_ASSISTANT_SYSTEM_PROMPT

    if document_text:
        prompt += (
            "\n\n**CURRENT DOCUMENT UNDER ANALYSIS:**\n"
            f"```\n{document_text[:document_limit]}\n```"
        )

    if context and context.legislation_title:
        prompt += (
            "\n\n**USER'S CURRENT LEGISLATION CONTEXT:**\n"
            f"- Legislation: {context.legislation_title or NOT_SPECIFIED}\n"
            f"- Country: {context.country or NOT_SPECIFIED}\n"
            f"- Year: {context.legislation_year or NOT_SPECIFIED}\n"
            f"- Jurisdiction: {context.jurisdiction or NOT_SPECIFIED}\n"
            f"- Parliament Type: {context.parliament_type or NOT_SPECIFIED}"
        )

    return prompt


def to_upstream_messages(messages: Iterable[TurnLike]) -> list[dict[str, str]]:
    """
    Normalizes roles and drops leading assistant turns.

    The upstream conversation must open with a user turn; the UI's welcome
    banner is an assistant turn.
    """
    turns = [m if isinstance(m, ChatTurn) else ChatTurn.from_mapping(m) for m in messages]
    upstream = [turn.to_upstream() for turn in turns]
    while upstream and upstream[0]["role"] == "assistant":
        upstream.pop(0)
    return upstream


# =============================================================================
# RELAY
# =============================================================================

class ChatRelay:
    """
    Relays conversations to the model under the PLS Assistant persona.

    Attributes:
        llm_client: Messages API client
        document_limit: Max supporting-document characters
    """

    def __init__(self, llm_client: AnthropicClient, document_limit: int = 20000):
        self.llm_client = llm_client
        self.document_limit = document_limit

    async def reply(
        self,
        messages: Iterable[TurnLike],
        document_text: Optional[str] = None,
        context: Optional[Union[ChatContext, Mapping[str, Any]]] = None,
    ) -> ChatReply:
        """
        Sends the conversation and returns the assistant reply.

        Args:
            messages: Ordered conversation (ChatTurn or {"role", "content"})
            document_text: Optional supporting document
            context: Optional legislation context

        Returns:
            ChatReply; never raises for upstream failures
        """
        if context is not None and not isinstance(context, ChatContext):
            context = ChatContext.from_mapping(context)

        upstream_messages = to_upstream_messages(messages)
        if not upstream_messages:
            return ChatReply.failed(NO_USER_MESSAGE_ERROR)

        system = build_system_prompt(document_text, context, self.document_limit)

        try:
            content = await self.llm_client.create_message(
                system=system,
                messages=upstream_messages,
            )
        except CredentialMissingError:
            return ChatReply.failed(NOT_CONFIGURED_ERROR)
        except UpstreamServiceError as e:
            if e.status_code is not None:
                return ChatReply.failed(SERVICE_ERROR)
            return ChatReply.failed(e.message)
        except Exception as e:
            logger.exception(f"Chat error: {e}")
            return ChatReply.failed(str(e) or SERVICE_ERROR)

        return ChatReply.ok(content)
