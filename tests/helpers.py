"""Test doubles shared across test modules."""

from __future__ import annotations

import json
from pathlib import Path

import httpx

from chatpane.llm import ChatMessage

COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"


class ScriptedLLM:
    """Returns queued replies or raises queued exceptions, recording every call."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[list[ChatMessage]] = []
        self.on_call = None

    def chat(self, messages: list[ChatMessage], *, temperature: float = 0.7) -> str:
        self.calls.append(list(messages))
        if self.on_call is not None:
            self.on_call()
        outcome = self.outcomes.pop(0) if self.outcomes else "ok"
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def status_error(status: int, body=None) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", COMPLETIONS_URL)
    if body is None:
        response = httpx.Response(status, request=request)
    elif isinstance(body, (dict, list)):
        response = httpx.Response(status, json=body, request=request)
    else:
        response = httpx.Response(status, text=body, request=request)
    return httpx.HTTPStatusError(f"status {status}", request=request, response=response)


def connect_error() -> httpx.ConnectError:
    return httpx.ConnectError("connection refused", request=httpx.Request("POST", COMPLETIONS_URL))


def read_session_log(path: Path) -> list[dict]:
    if not path.exists():
        return []
    out: list[dict] = []
    for ln in path.read_text(encoding="utf-8").splitlines():
        ln = ln.strip()
        if ln:
            out.append(json.loads(ln))
    return out
