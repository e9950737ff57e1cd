from __future__ import annotations

import logging

import httpx

from chatpane.config import DEFAULT_GREETING
from chatpane.errors import describe_error
from chatpane.llm import ChatMessage, LLMClient
from chatpane.schema import ChatState, Message, Sender

logger = logging.getLogger(__name__)


class ConversationController:
    """
    Owns the transcript and the awaiting-response flag for one chat session.

    A submission is split in two so a UI can render between the halves:
    ``begin`` records the user message and marks the session busy, ``resolve``
    makes the single completion call and records the outcome. ``submit`` runs
    both back to back.
    """

    def __init__(
        self,
        llm: LLMClient,
        *,
        greeting: str = DEFAULT_GREETING,
        temperature: float = 0.7,
    ) -> None:
        self.llm = llm
        self.temperature = temperature
        self._state = ChatState(messages=[Message(text=greeting, sender=Sender.ASSISTANT)])

    @property
    def state(self) -> ChatState:
        return self._state

    @property
    def messages(self) -> list[Message]:
        return list(self._state.messages)

    @property
    def awaiting_response(self) -> bool:
        return self._state.awaiting_response

    @property
    def pending_input(self) -> str:
        return self._state.pending_input

    def set_input(self, text: str) -> None:
        self._state.pending_input = text

    def begin(self, raw_input: str | None = None) -> bool:
        """Record a user message and mark the session busy. Returns False on no-op."""
        text = self._state.pending_input if raw_input is None else raw_input
        if not text.strip():
            return False
        if self._state.awaiting_response:
            logger.warning("Rejected submission while a response is still pending")
            return False

        # Stored as typed; trimming only decides whether it is empty.
        self._state.messages.append(Message(text=text, sender=Sender.USER))
        self._state.pending_input = ""
        self._state.awaiting_response = True
        return True

    def resolve(self) -> Message:
        """Call the completion service once and append exactly one assistant message."""
        if not self._state.awaiting_response:
            raise RuntimeError("resolve() called with no pending submission")

        try:
            try:
                reply_text = self.llm.chat(self.build_payload(), temperature=self.temperature)
                # Clients outside this package may hand back non-text replies.
                reply = Message(text=reply_text, sender=Sender.ASSISTANT)
            except httpx.HTTPError as exc:
                reply = Message(text=describe_error(exc), sender=Sender.ASSISTANT)
                status = exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None
                logger.warning("Completion request failed (status=%s): %s", status, reply.text)
            except Exception as exc:  # noqa: BLE001
                reply = Message(text=describe_error(exc), sender=Sender.ASSISTANT)
                logger.exception("Unexpected completion error: %s", exc)
            self._state.messages.append(reply)
            return reply
        finally:
            self._state.awaiting_response = False

    def submit(self, raw_input: str | None = None) -> Message | None:
        if not self.begin(raw_input):
            return None
        return self.resolve()

    def build_payload(self) -> list[ChatMessage]:
        return [ChatMessage(role=m.role, content=m.text) for m in self._state.messages]
