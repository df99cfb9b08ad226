"""Summary strategies: generative (LLM) first, heuristic as fallback."""

from .base import PageContext, SummaryStep
from .heuristic import HeuristicSummaryStep, detect_signals, extract_keywords
from .llm import LLMSummaryStep

__all__ = [
    "PageContext",
    "SummaryStep",
    "LLMSummaryStep",
    "HeuristicSummaryStep",
    "extract_keywords",
    "detect_signals",
]
