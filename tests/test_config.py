"""
Tests for the settings.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from plscc.config import Settings, get_settings, override_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ANTHROPIC_API_KEY", "LLM_MODEL", "CORS_ORIGINS", "PORT", "EXTRACTION_CHAR_LIMIT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings()

    assert settings.anthropic_api_key == ""
    assert settings.ai_configured is False
    assert settings.port == 3001
    assert settings.relay_url == "http://localhost:3001"
    assert settings.llm_timeout == 120.0
    assert settings.extraction_char_limit == 15000
    assert settings.chat_document_char_limit == 20000
    assert settings.min_document_chars == 50
    assert settings.allowed_origins == ["*"]


def test_environment_is_read(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, http://localhost:8501,")

    settings = Settings()

    assert settings.ai_configured is True
    assert settings.port == 8080
    assert settings.allowed_origins == ["http://localhost:5173", "http://localhost:8501"]


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_override_settings(monkeypatch):
    # override_settings writes os.environ; register the keys so monkeypatch restores them
    monkeypatch.setenv("LLM_MODEL", "placeholder")
    monkeypatch.setenv("EXTRACTION_CHAR_LIMIT", "0")

    settings = override_settings(llm_model="claude-test", extraction_char_limit=500)

    assert settings.llm_model == "claude-test"
    assert settings.extraction_char_limit == 500
    assert get_settings() is settings
