"""LLM provider adapters for the generative summary step."""

from .base import LLMAPIError, LLMClient, LLMResponse
from .openai import OpenAIClient

__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMAPIError",
    "OpenAIClient",
]
