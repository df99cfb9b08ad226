"""Pydantic schemas for lookup results.

- EnrichmentResult: what a lookup returns (camelCase on the wire)
- Signal / Source: nested result entries
- GeneratedSummary: validated payload from the summarization model

Example:
    from vcscout.schemas import EnrichmentResult

    payload = result.to_dict()
    payload["whatTheyDo"]
"""

from .base import CamelModel, UsageInfo
from .enrichment import (
    NO_SUMMARY_PLACEHOLDER,
    Confidence,
    EnrichmentResult,
    GeneratedSummary,
    Signal,
    Source,
)

__all__ = [
    "CamelModel",
    "UsageInfo",
    "Confidence",
    "Signal",
    "Source",
    "EnrichmentResult",
    "GeneratedSummary",
    "NO_SUMMARY_PLACEHOLDER",
]
