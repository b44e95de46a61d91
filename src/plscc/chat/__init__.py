"""
Chat module - PLS Assistant relay.
"""

from .relay import (
    ChatContext,
    ChatRelay,
    ChatReply,
    ChatTurn,
    NOT_CONFIGURED_ERROR,
    SERVICE_ERROR,
    build_system_prompt,
    to_upstream_messages,
)

__all__ = [
    "ChatContext",
    "ChatRelay",
    "ChatReply",
    "ChatTurn",
    "NOT_CONFIGURED_ERROR",
    "SERVICE_ERROR",
    "build_system_prompt",
    "to_upstream_messages",
]
