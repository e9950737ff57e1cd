from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """One transcript entry. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    text: str
    sender: Sender

    @property
    def role(self) -> str:
        # Role name used by chat-completion payloads.
        return "user" if self.sender is Sender.USER else "assistant"


class ChatState(BaseModel):
    """View state shared with the rendering layer."""

    # Oldest first; append-only.
    messages: list[Message] = Field(default_factory=list)

    # Input buffer fed by the rendering layer
    pending_input: str = ""

    # True while a completion request is outstanding
    awaiting_response: bool = False
