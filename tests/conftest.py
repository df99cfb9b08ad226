"""Shared fakes for the lookup tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from vcscout.steps.providers.base import LLMAPIError, LLMResponse

FIXED_TIMESTAMP = "2026-03-01T12:00:00.000Z"


class FakeLLMClient:
    """In-memory ``LLMClient`` that records calls.

    Pass ``content`` (a str, or a dict that is JSON-encoded) to return, or
    ``error`` to raise ``LLMAPIError``.
    """

    def __init__(self, content: Any = None, error: LLMAPIError | None = None):
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        self.content = content or ""
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def complete(
        self,
        messages: list[dict[str, Any]],
        model: str,
        temperature: float,
        max_tokens: int,
        response_format: dict[str, Any] | None = None,
    ) -> LLMResponse:
        self.calls.append(
            dict(
                messages=messages,
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format=response_format,
            )
        )
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content)


@pytest.fixture
def fixed_timestamp(monkeypatch):
    """Freeze the fetch timestamp so results from two lookups compare equal."""
    monkeypatch.setattr("vcscout.utils.fetch.utc_timestamp", lambda: FIXED_TIMESTAMP)
    return FIXED_TIMESTAMP
