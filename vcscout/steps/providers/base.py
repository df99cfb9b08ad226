"""LLMClient protocol and LLMResponse — provider-agnostic LLM interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from ...schemas.base import UsageInfo


@dataclass
class LLMResponse:
    """Response from an LLM provider.

    Attributes:
        content: The text content of the response.
        usage: Token usage information.
    """

    content: str
    usage: Optional[UsageInfo] = None


class LLMAPIError(Exception):
    """Provider-agnostic API error.

    Wraps SDK-specific errors (timeouts, non-2xx responses, connection
    failures) so the summarization step only needs to catch one type.
    """

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@runtime_checkable
class LLMClient(Protocol):
    """Protocol all LLM provider adapters must satisfy."""

    async def complete(
        self,
        messages: list[dict[str, Any]],
        model: str,
        temperature: float,
        max_tokens: int,
        response_format: dict[str, Any] | None = None,
    ) -> LLMResponse: ...
