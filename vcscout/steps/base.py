"""Step protocol and page context for the summary strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from ..schemas.enrichment import EnrichmentResult, Source


@dataclass(frozen=True)
class PageContext:
    """Immutable snapshot of a fetched page handed to each step.

    Attributes:
        url: Normalized lookup URL.
        html: Full, untruncated response body (signal detection scans this).
        text: Extracted, truncated plain text (the only summarizer input).
        fetched_at: Fetch timestamp; becomes ``enriched_at``.
    """

    url: str
    html: str
    text: str
    fetched_at: str

    def source(self) -> Source:
        return Source(url=self.url, timestamp=self.fetched_at)


@runtime_checkable
class SummaryStep(Protocol):
    """Protocol both summary strategies satisfy.

    ``run`` returns ``None`` when the step could not produce a result and
    the caller should move on to the next strategy.
    """

    name: str

    async def run(self, ctx: PageContext) -> Optional[EnrichmentResult]: ...
