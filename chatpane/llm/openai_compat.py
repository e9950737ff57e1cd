from __future__ import annotations

import logging

import httpx

from .base import ChatMessage, EmptyCompletionError, MalformedCompletionError

logger = logging.getLogger(__name__)


class OpenAICompatLLM:
    """
    Minimal OpenAI-compatible ChatCompletions client via raw HTTP.
    Works with OpenAI or any OpenAI-compatible gateway if you point base_url accordingly.

    Failures are raised, not swallowed: non-2xx statuses surface as
    ``httpx.HTTPStatusError`` and transport problems (including timeouts) as
    ``httpx.RequestError``. A single attempt is made per call.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str = "https://api.openai.com/v1",
        timeout_s: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.transport = transport

    def chat(self, messages: list[ChatMessage], *, temperature: float = 0.7) -> str:
        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": temperature,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        logger.debug("POST %s model=%s messages=%d", url, self.model, len(messages))
        with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
            r = client.post(url, json=payload, headers=headers)
            r.raise_for_status()
            data = r.json()
        # OpenAI returns: choices[0].message.content
        choices = data.get("choices") or []
        if not choices:
            raise EmptyCompletionError("completion response contained no choices")
        msg = (choices[0] or {}).get("message") or {}
        content = msg.get("content", "") or ""
        if not isinstance(content, str):
            raise MalformedCompletionError(f"completion content is {type(content).__name__}, not text")
        return content
