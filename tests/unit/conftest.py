"""Shared fixtures for unit tests."""

import pytest

AI_ENV_VARS = (
    "AI_PROVIDER",
    "AI_MODEL_NAME",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "ANTHROPIC_API_KEY",
    "GEMINI_API_KEY",
    "GENERATION_MIN_CANDIDATES",
    "GENERATION_MAX_CANDIDATES",
    "MOCK_GENERATION_DELAY_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_ai_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep AI provider settings exported on the machine out of unit tests."""
    for name in AI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
