from .base import ChatMessage, EmptyCompletionError, LLMClient, MalformedCompletionError
from .factory import build_llm

__all__ = ["ChatMessage", "EmptyCompletionError", "LLMClient", "MalformedCompletionError", "build_llm"]
