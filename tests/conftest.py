"""Shared fixtures."""

from __future__ import annotations

import pytest

ENV_KEYS = [
    "OPENAI_API_KEY",
    "CHATPANE_LLM_BACKEND",
    "CHATPANE_OPENAI_MODEL",
    "CHATPANE_OPENAI_BASE_URL",
    "CHATPANE_TIMEOUT_S",
    "CHATPANE_TEMPERATURE",
    "CHATPANE_GREETING",
    "CHATPANE_LOG_DIR",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # Ignore any developer .env on disk.
    monkeypatch.setattr("chatpane.config.load_dotenv", lambda **kwargs: False)
    return monkeypatch
