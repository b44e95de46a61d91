"""
Async client for the Anthropic Messages API.

Single message-completion call: system instruction, model, max output
tokens and an ordered message list in; the first text block of the reply
out. No automatic retries: callers fall back (extraction) or report the
failure (chat) as soon as a call fails.

Usage:
    from plscc.llm import AnthropicClient, LLMConfig

    async with AnthropicClient(LLMConfig(api_key="sk-...")) as client:
        reply = await client.create_message(
            system="You are a parliamentary clerk.",
            messages=[{"role": "user", "content": "What is PLS?"}],
        )
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from ..config import Settings
from ..errors import CredentialMissingError, UpstreamServiceError

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class LLMConfig:
    """Model client configuration."""

    # Connection
    base_url: str = "https://api.anthropic.com"
    api_key: str = ""
    api_version: str = "2023-06-01"
    timeout: float = 120.0  # seconds

    # Model
    model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 4096

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMConfig":
        """Builds the config from application settings."""
        return cls(
            base_url=settings.anthropic_base_url,
            api_key=settings.anthropic_api_key,
            api_version=settings.anthropic_version,
            timeout=settings.llm_timeout,
            model=settings.llm_model,
            max_tokens=settings.max_tokens,
        )


# =============================================================================
# CLIENT
# =============================================================================

class AnthropicClient:
    """
    Client for the Anthropic Messages API.

    Attributes:
        config: Client configuration
        _client: Async HTTP client (owned unless injected)
    """

    def __init__(
        self,
        config: Optional[LLMConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        """
        Args:
            config: Configuration. Default LLMConfig() if omitted.
            http_client: Shared AsyncClient (tests inject a MockTransport here)
            **kwargs: Overrides config fields (e.g. api_key="...")
        """
        self.config = config or LLMConfig()

        for key, value in kwargs.items():
            if hasattr(self.config, key):
                setattr(self.config, key, value)

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.config.timeout)

        logger.info(f"AnthropicClient ready: {self.config.base_url} (configured={self.is_configured})")

    @property
    def is_configured(self) -> bool:
        """True when an API key is set."""
        return bool(self.config.api_key)

    @property
    def messages_url(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/v1/messages"

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self.config.api_key,
            "anthropic-version": self.config.api_version,
        }

    async def create_message(
        self,
        system: str,
        messages: list[dict],
        max_tokens: Optional[int] = None,
        model: Optional[str] = None,
    ) -> str:
        """
        Sends one message-completion request.

        Args:
            system: System instruction
            messages: Ordered [{"role": "user"|"assistant", "content": "..."}]
            max_tokens: Max output tokens (default: config)
            model: Model identifier (default: config)

        Returns:
            Text of the first text block of the reply

        Raises:
            CredentialMissingError: No API key configured
            UpstreamServiceError: Network failure, non-success status or
                malformed reply
        """
        if not self.is_configured:
            raise CredentialMissingError()

        payload = {
            "model": model or self.config.model,
            "max_tokens": max_tokens or self.config.max_tokens,
            "system": system,
            "messages": messages,
        }

        start_time = time.time()
        try:
            response = await self._client.post(
                self.messages_url,
                json=payload,
                headers=self._headers(),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Anthropic API error: {status} - {e.response.text[:500]}")
            raise UpstreamServiceError(
                f"Anthropic API returned HTTP {status}",
                status_code=status,
                details={"body": e.response.text[:500]},
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Anthropic API request failed: {e!r}")
            raise UpstreamServiceError(f"Anthropic API request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamServiceError("Anthropic API returned a non-JSON body") from e

        content = first_text_block(data)

        usage = data.get("usage", {}) if isinstance(data, dict) else {}
        logger.debug(
            f"Anthropic response: {time.time() - start_time:.2f}s, "
            f"input_tokens={usage.get('input_tokens', '?')}, "
            f"output_tokens={usage.get('output_tokens', '?')}"
        )

        return content

    async def aclose(self):
        """Closes the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    def __repr__(self) -> str:
        return f"AnthropicClient(url={self.config.base_url!r}, model={self.config.model!r})"


def first_text_block(data: Any) -> str:
    """Returns the text of the first text block of a Messages API reply."""
    blocks = data.get("content") if isinstance(data, dict) else None
    if isinstance(blocks, list):
        for block in blocks:
            if isinstance(block, dict) and block.get("type", "text") == "text" and isinstance(block.get("text"), str):
                return block["text"]
    raise UpstreamServiceError("Anthropic API reply has no text content")
