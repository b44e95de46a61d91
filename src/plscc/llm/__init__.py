"""
Model-provider integration.

Async client for the Anthropic Messages API, prompts, and JSON
extraction from replies.
"""

from .anthropic_client import AnthropicClient, LLMConfig, first_text_block
from .prompts import (
    EXTRACTION_SYSTEM_PROMPT,
    PLS_ASSISTANT_SYSTEM_PROMPT,
    TRUNCATION_NOTICE,
    build_extraction_message,
    truncate_document,
)
from .response_parser import extract_json_object, find_first_json_object

__all__ = [
    "AnthropicClient",
    "LLMConfig",
    "first_text_block",
    "EXTRACTION_SYSTEM_PROMPT",
    "PLS_ASSISTANT_SYSTEM_PROMPT",
    "TRUNCATION_NOTICE",
    "build_extraction_message",
    "truncate_document",
    "extract_json_object",
    "find_first_json_object",
]
