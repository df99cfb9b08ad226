"""Lifecycle hooks for lookup observability.

Typed event dataclasses + ``EnrichmentHooks`` container.  Hook callables
are optional; ``_fire_hook`` silently catches errors so observability
failures never break a lookup.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Event dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LookupStartEvent:
    """Fired once validation has passed, before the page fetch."""

    url: str


@dataclass(frozen=True)
class FetchCompleteEvent:
    """Fired after the page body has been read."""

    url: str
    status_code: int
    content_length: int
    fetched_at: str


@dataclass(frozen=True)
class StrategyFallbackEvent:
    """Fired when the heuristic summary is used instead of the LLM.

    ``reason`` is ``"no_backend"`` when no credential is configured and
    ``"generative_failed"`` when the LLM call or its payload was unusable.
    """

    url: str
    reason: str


@dataclass(frozen=True)
class LookupEndEvent:
    """Fired once at the end of ``enrich()`` (including on error)."""

    url: str
    strategy: str | None
    error: BaseException | None
    elapsed_seconds: float


# ---------------------------------------------------------------------------
# EnrichmentHooks container
# ---------------------------------------------------------------------------


@dataclass
class EnrichmentHooks:
    """User-facing hook container — pass to ``EnrichmentService``.

    All fields are optional callables. Sync and async callables both work.
    Hook errors are caught and logged; they never fail the lookup.
    """

    on_lookup_start: Optional[Callable[[LookupStartEvent], Any]] = None
    on_fetch_complete: Optional[Callable[[FetchCompleteEvent], Any]] = None
    on_strategy_fallback: Optional[Callable[[StrategyFallbackEvent], Any]] = None
    on_lookup_end: Optional[Callable[[LookupEndEvent], Any]] = None


# ---------------------------------------------------------------------------
# Fire helper
# ---------------------------------------------------------------------------


async def _fire_hook(hook: Optional[Callable], event: Any) -> None:
    """Call *hook* with *event*, awaiting if async.  Silently catches errors."""
    if hook is None:
        return
    try:
        result = hook(event)
        if inspect.isawaitable(result):
            await result
    except Exception:
        logger.warning("Hook %s raised an exception", hook, exc_info=True)
