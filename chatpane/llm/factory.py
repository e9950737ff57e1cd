from __future__ import annotations

from chatpane.config import Settings

from .mock import MockLLM
from .openai_compat import OpenAICompatLLM


def build_llm(settings: Settings):
    backend = settings.llm_backend
    if backend == "mock":
        return MockLLM()
    if backend == "openai":
        if not settings.openai_api_key:
            raise RuntimeError("OPENAI_API_KEY is not set but CHATPANE_LLM_BACKEND=openai")
        return OpenAICompatLLM(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout_s=settings.timeout_s,
        )
    raise ValueError(f"Unknown CHATPANE_LLM_BACKEND={backend!r}, expected one of: mock|openai")
