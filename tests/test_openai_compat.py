"""Tests for the OpenAI-compatible HTTP client."""

import json

import httpx
import pytest

from chatpane.llm import ChatMessage, EmptyCompletionError, MalformedCompletionError
from chatpane.llm.openai_compat import OpenAICompatLLM


def make_client(handler, **kwargs) -> OpenAICompatLLM:
    return OpenAICompatLLM(
        api_key="sk-test",
        model=kwargs.pop("model", "gpt-3.5-turbo"),
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def completion(content: str) -> dict:
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


def test_posts_model_messages_and_bearer_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=completion("Hi there"))

    client = make_client(handler, base_url="https://gateway.example.com/v1/")
    reply = client.chat(
        [ChatMessage("assistant", "Hello!"), ChatMessage("user", "Hello")],
        temperature=0.3,
    )

    assert reply == "Hi there"
    [request] = seen
    assert request.method == "POST"
    assert str(request.url) == "https://gateway.example.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body == {
        "model": "gpt-3.5-turbo",
        "messages": [
            {"role": "assistant", "content": "Hello!"},
            {"role": "user", "content": "Hello"},
        ],
        "temperature": 0.3,
    }


def test_uses_first_choice() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": [completion("first")["choices"][0], completion("second")["choices"][0]]})

    assert make_client(handler).chat([ChatMessage("user", "x")]) == "first"


def test_null_content_becomes_empty_string() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": None}}]})

    assert make_client(handler).chat([ChatMessage("user", "x")]) == ""


def test_empty_choices_raise() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": []})

    with pytest.raises(EmptyCompletionError):
        make_client(handler).chat([ChatMessage("user", "x")])


def test_error_status_raises_with_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Incorrect API key provided"}})

    with pytest.raises(httpx.HTTPStatusError) as info:
        make_client(handler).chat([ChatMessage("user", "x")])
    assert info.value.response.status_code == 401


def test_transport_failure_raises_request_error() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.RequestError):
        make_client(handler).chat([ChatMessage("user", "x")])
    # Single attempt, no retries.
    assert len(calls) == 1


@pytest.mark.parametrize("content", [42, [{"type": "text", "text": "hi"}], {"x": 1}])
def test_non_text_content_raises(content) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})

    with pytest.raises(MalformedCompletionError):
        make_client(handler).chat([ChatMessage("user", "x")])
