"""HeuristicSummaryStep — deterministic keyword and signal extraction.

Used when no generative backend is configured or the LLM step returned
nothing usable. Always succeeds.
"""

from __future__ import annotations

import re
from collections import Counter

from ..schemas.enrichment import EnrichmentResult, Signal
from .base import PageContext

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "is", "are", "was", "were", "be", "been", "have",
    "has", "had", "do", "does", "did", "will", "would", "should", "could",
    "may", "might", "must", "can", "this", "that", "these", "those",
})

MIN_KEYWORD_LENGTH = 5

DEFAULT_KEYWORDS = ("company", "business", "services")

GENERIC_ACTIVITIES = (
    "Provides services and solutions",
    "Maintains an active web presence",
    "Engages with customers online",
)

_NON_WORD = re.compile(r"[^\w]", re.ASCII)

# (substrings, signal) in emission order; any substring match fires the signal
_SIGNAL_RULES: tuple[tuple[tuple[str, ...], Signal], ...] = (
    (
        ("career", "job"),
        Signal(
            type="Careers Page",
            description="Company has a careers or jobs page, indicating active hiring",
            confidence="high",
        ),
    ),
    (
        ("blog",),
        Signal(
            type="Blog Present",
            description="Company maintains a blog for content marketing",
            confidence="medium",
        ),
    ),
    (
        ("changelog", "update"),
        Signal(
            type="Product Updates",
            description="Company publishes product updates or changelogs",
            confidence="medium",
        ),
    ),
)

WEBSITE_ACTIVE = Signal(
    type="Website Active",
    description="Company website is accessible and contains content",
    confidence="high",
)


def default_signals() -> list[Signal]:
    """The single signal used when nothing more specific was found."""
    return [WEBSITE_ACTIVE]


def extract_keywords(text: str, limit: int = 10) -> list[str]:
    """Rank the most frequent non-stop-word tokens in *text*.

    Tokens are lower-cased, stripped of non-word characters and kept only
    if at least five characters long. Equal counts keep first-seen order.
    """
    counts: Counter[str] = Counter()
    for word in text.lower().split():
        token = _NON_WORD.sub("", word)
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOP_WORDS:
            counts[token] += 1

    # sorted() is stable, so ties stay in insertion order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [token for token, _ in ranked[:limit]]


def detect_signals(html: str) -> list[Signal]:
    """Case-insensitive substring scan of the raw page body."""
    haystack = html.lower()
    signals = [
        signal
        for needles, signal in _SIGNAL_RULES
        if any(needle in haystack for needle in needles)
    ]
    return signals or default_signals()


class HeuristicSummaryStep:
    """Builds an ``EnrichmentResult`` without any external calls."""

    name = "heuristic"

    def __init__(self, max_keywords: int = 10, summary_chars: int = 200):
        self.max_keywords = max_keywords
        self.summary_chars = summary_chars

    async def run(self, ctx: PageContext) -> EnrichmentResult:
        keywords = extract_keywords(ctx.text, limit=self.max_keywords)
        return EnrichmentResult(
            summary=ctx.text[: self.summary_chars] + "...",
            what_they_do=list(GENERIC_ACTIVITIES),
            keywords=keywords or list(DEFAULT_KEYWORDS),
            signals=detect_signals(ctx.html),
            sources=[ctx.source()],
            enriched_at=ctx.fetched_at,
        )
