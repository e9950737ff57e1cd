from __future__ import annotations

from .base import ChatMessage


class MockLLM:
    """Deterministic mock backend: useful to try the widget without an API key."""

    def chat(self, messages: list[ChatMessage], *, temperature: float = 0.7) -> str:
        last_user = next((m.content for m in reversed(messages) if m.role == "user"), "")
        return (
            "(mock) You said:\n"
            f"{last_user}\n\n"
            "Set OPENAI_API_KEY to talk to a real model."
        )
