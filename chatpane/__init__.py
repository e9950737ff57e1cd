"""Chat widget that talks to an OpenAI-compatible chat-completion service."""

from .controller import ConversationController

__all__ = ["ConversationController"]

__version__ = "0.1.0"
