"""
Centralized configuration for the PLS Command Center.

Reads environment variables with fallback to local defaults. The relay
server is the only process that needs ANTHROPIC_API_KEY; the Streamlit
shell only needs RELAY_URL.

Usage:
    from plscc.config import get_settings

    settings = get_settings()
    print(settings.relay_url)        # http://localhost:3001
    print(settings.ai_configured)    # True when ANTHROPIC_API_KEY is set
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """System settings."""

    # Anthropic
    anthropic_api_key: str = field(default_factory=lambda: _env("ANTHROPIC_API_KEY", ""))
    anthropic_base_url: str = field(default_factory=lambda: _env("ANTHROPIC_BASE_URL", "https://api.anthropic.com"))
    anthropic_version: str = field(default_factory=lambda: _env("ANTHROPIC_VERSION", "2023-06-01"))

    # Model
    llm_model: str = field(default_factory=lambda: _env("LLM_MODEL", "claude-sonnet-4-5-20250929"))
    max_tokens: int = field(default_factory=lambda: int(_env("LLM_MAX_TOKENS", "4096")))
    llm_timeout: float = field(default_factory=lambda: float(_env("LLM_TIMEOUT", "120.0")))

    # Relay server
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3001")))
    relay_url: str = field(default_factory=lambda: _env("RELAY_URL", "http://localhost:3001"))
    cors_origins: str = field(default_factory=lambda: _env("CORS_ORIGINS", "*"))

    # Request-size limits
    extraction_char_limit: int = field(default_factory=lambda: int(_env("EXTRACTION_CHAR_LIMIT", "15000")))
    chat_document_char_limit: int = field(default_factory=lambda: int(_env("CHAT_DOCUMENT_CHAR_LIMIT", "20000")))
    min_document_chars: int = field(default_factory=lambda: int(_env("MIN_DOCUMENT_CHARS", "50")))

    @property
    def ai_configured(self) -> bool:
        """True when an upstream credential is available."""
        return bool(self.anthropic_api_key)

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Returns the settings singleton."""
    return Settings()


# Runtime override helper (tests)
def override_settings(**kwargs) -> Settings:
    """Overrides settings through the environment and rebuilds the singleton."""
    get_settings.cache_clear()
    for key, value in kwargs.items():
        os.environ[key.upper()] = str(value)
    return get_settings()
