from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_GREETING = "Hello! I'm your AI assistant. How can I help you today?"


@dataclass(frozen=True)
class Settings:
    llm_backend: str

    openai_model: str
    openai_base_url: str
    timeout_s: float
    temperature: float

    greeting: str
    log_dir: Path

    # Kept out of repr so settings can be logged safely.
    openai_api_key: str | None = field(default=None, repr=False)


def load_settings() -> Settings:
    # Allow users to keep secrets in a local `.env` (not committed).
    load_dotenv(override=False)

    def getenv(key: str, default: str | None = None) -> str | None:
        v = os.getenv(key)
        if v is None or v == "":
            return default
        return v

    openai_api_key = getenv("OPENAI_API_KEY", None)
    default_backend = "openai" if openai_api_key else "mock"
    llm_backend = (getenv("CHATPANE_LLM_BACKEND", default_backend) or default_backend).strip().lower()

    openai_model = getenv("CHATPANE_OPENAI_MODEL", "gpt-3.5-turbo") or ""
    openai_base_url = getenv("CHATPANE_OPENAI_BASE_URL", "https://api.openai.com/v1") or ""

    timeout_s = float(getenv("CHATPANE_TIMEOUT_S", "60") or "60")
    if timeout_s <= 0:
        raise ValueError(f"CHATPANE_TIMEOUT_S must be positive, got {timeout_s!r}")
    temperature = float(getenv("CHATPANE_TEMPERATURE", "0.7") or "0.7")

    greeting = getenv("CHATPANE_GREETING", DEFAULT_GREETING) or DEFAULT_GREETING
    log_dir = Path(getenv("CHATPANE_LOG_DIR", "logs") or "logs").resolve()

    return Settings(
        llm_backend=llm_backend,
        openai_model=openai_model,
        openai_base_url=openai_base_url,
        timeout_s=timeout_s,
        temperature=temperature,
        greeting=greeting,
        log_dir=log_dir,
        openai_api_key=openai_api_key,
    )
