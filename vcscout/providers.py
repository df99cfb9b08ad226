"""Convenience re-export of LLM provider adapters.

Usage:
    from vcscout.providers import OpenAIClient
"""

from .steps.providers.base import LLMAPIError, LLMClient, LLMResponse
from .steps.providers.openai import OpenAIClient

__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMAPIError",
    "OpenAIClient",
]
