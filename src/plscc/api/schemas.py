"""
Request and response models of the relay HTTP service.

Wire keys are camelCase, matching the browser client; Python attributes
are snake_case.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Health ---

class HealthResponse(_Wire):
    status: str
    ai_configured: bool = Field(alias="aiConfigured")
    timestamp: str


# --- Extraction ---

class ExtractRequest(_Wire):
    text: Optional[str] = None
    filename: Optional[str] = None


# --- Chat ---

class ChatMessageModel(_Wire):
    role: str = "user"
    content: str = ""


class ChatRequest(_Wire):
    messages: Optional[list[ChatMessageModel]] = None
    document_text: Optional[str] = Field(default=None, alias="documentText")
    # Free-form: the UI sends its whole context record
    context: Optional[dict[str, Any]] = None
