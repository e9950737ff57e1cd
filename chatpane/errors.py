"""Turn a failed completion call into the text shown in the transcript."""

from __future__ import annotations

import httpx

API_KEY_ERROR = "API key error. Please check your OpenAI API key."
NO_RESPONSE_ERROR = "No response received from the server. Please check your internet connection."
GENERIC_ERROR = "Sorry, I couldn't fetch a response."


def describe_error(exc: BaseException) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        if exc.response.status_code == 401:
            return API_KEY_ERROR
        message = _service_error_message(exc.response)
        if message:
            return f"Error: {message}"
        return GENERIC_ERROR
    if isinstance(exc, httpx.RequestError):
        # Request went out (or tried to) but nothing came back: connect errors, timeouts.
        return NO_RESPONSE_ERROR
    return GENERIC_ERROR


def _service_error_message(response: httpx.Response) -> str | None:
    """Return ``error.message`` from an OpenAI-style error body, if any."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    err = data.get("error")
    if not isinstance(err, dict):
        return None
    message = err.get("message")
    if not message:
        return None
    return str(message)
