from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user" | "assistant"
    content: str


class LLMClient(Protocol):
    def chat(self, messages: list[ChatMessage], *, temperature: float = 0.7) -> str:
        """Return assistant text output."""
        raise NotImplementedError


class EmptyCompletionError(ValueError):
    """The completion service answered 2xx but returned no choices."""


class MalformedCompletionError(ValueError):
    """The completion service answered 2xx with a reply that is not text."""
