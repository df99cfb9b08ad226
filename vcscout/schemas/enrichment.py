"""Enrichment-specific Pydantic schemas.

Defines the wire contract returned by a lookup (``EnrichmentResult``)
and the shape accepted from the summarization model
(``GeneratedSummary``).
"""

from typing import Any, Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from .base import CamelModel

Confidence = Literal["high", "medium", "low"]

NO_SUMMARY_PLACEHOLDER = "No summary available."


class Signal(CamelModel):
    """A derived observation about the company's web presence.

    Attributes:
        type: Short label, e.g. ``"Careers Page"``.
        description: One-line explanation of the signal.
        confidence: Ranked level; no numeric score is exposed.
    """

    type: str
    description: str
    confidence: Confidence

    @field_validator("confidence", mode="before")
    @classmethod
    def normalize_confidence(cls, v: Any) -> Any:
        """Accept ``"High"`` / ``" medium "`` from LLM output."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class Source(CamelModel):
    """Citation for the page a result was derived from."""

    url: str
    timestamp: str


class EnrichmentResult(CamelModel):
    """Structured summary of a company website.

    Constructed once per lookup and never mutated. ``enriched_at`` is the
    fetch timestamp and always equals ``sources[0].timestamp``.

    Attributes:
        summary: 1-2 sentence description.
        what_they_do: 3-6 activity bullets, in order.
        keywords: Terms ranked by relevance or frequency.
        signals: Derived signals; never empty.
        sources: Exactly one entry, the normalized lookup URL.
        enriched_at: ISO-8601 completion timestamp.
    """

    summary: str
    what_they_do: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    signals: list[Signal] = Field(min_length=1)
    sources: list[Source] = Field(min_length=1)
    enriched_at: str

    def to_dict(self) -> dict[str, Any]:
        """camelCase JSON-ready dictionary."""
        return self.model_dump(by_alias=True)


class GeneratedSummary(CamelModel):
    """Validated payload from the summarization model.

    Every field is optional; absent or ``null`` lists become empty and an
    absent or blank summary becomes :data:`NO_SUMMARY_PLACEHOLDER`.
    Wrong shapes (e.g. ``keywords`` as a single string) fail validation.
    """

    model_config = ConfigDict(extra="ignore")

    summary: Optional[str] = None
    what_they_do: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    signals: list[Signal] = Field(default_factory=list)

    @field_validator("what_they_do", "keywords", "signals", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def summary_text(self) -> str:
        if self.summary is None or not self.summary.strip():
            return NO_SUMMARY_PLACEHOLDER
        return self.summary
