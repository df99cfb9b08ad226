"""
EnrichmentService — the company website lookup.

Validates the URL, fetches the page once, extracts its text, then runs a
two-strategy chain: the generative summary when a backend is configured,
otherwise (or when it yields nothing usable) the deterministic heuristic.
"""

from __future__ import annotations

import time
from typing import Optional

from ..schemas.enrichment import EnrichmentResult
from ..steps.base import PageContext
from ..steps.heuristic import HeuristicSummaryStep
from ..steps.llm import LLMSummaryStep
from ..steps.providers.base import LLMClient
from ..utils.fetch import PageFetcher
from ..utils.html import extract_text
from ..utils.logger import get_logger
from ..utils.urls import normalize_url
from .config import EnrichmentConfig
from .exceptions import ConfigurationError
from .hooks import (
    EnrichmentHooks,
    FetchCompleteEvent,
    LookupEndEvent,
    LookupStartEvent,
    StrategyFallbackEvent,
    _fire_hook,
)

logger = get_logger(__name__)


class EnrichmentService:
    """
    Looks up a company website and returns a structured summary.

    The service holds no per-lookup state: concurrent ``enrich()`` calls
    are independent. Cancelling the awaiting task aborts the in-flight
    request and releases its connection.

    Args:
        config: Lookup settings. The OpenAI credential in it decides whether
            the generative strategy is available.
        llm_client: Explicit LLM client. Takes precedence over the
            credential in *config*.
        fetcher: Page fetcher; built from *config* when omitted.
        hooks: Optional lifecycle callbacks.
    """

    def __init__(
        self,
        config: Optional[EnrichmentConfig] = None,
        llm_client: Optional[LLMClient] = None,
        fetcher: Optional[PageFetcher] = None,
        hooks: Optional[EnrichmentHooks] = None,
    ):
        self.config = config or EnrichmentConfig()
        self.hooks = hooks or EnrichmentHooks()
        self.fetcher = fetcher or PageFetcher(
            timeout=self.config.fetch_timeout,
            user_agent=self.config.user_agent,
        )

        if llm_client is None and self.config.has_openai_key:
            from ..steps.providers.openai import OpenAIClient

            llm_client = OpenAIClient(
                api_key=self.config.openai_api_key,
                base_url=self.config.openai_base_url,
                timeout=self.config.llm_timeout,
            )
        elif llm_client is None and self.config.openai_base_url:
            raise ConfigurationError(
                "openai_base_url is set but no API key was provided. Set OPENAI_API_KEY "
                "or pass llm_client to EnrichmentService()"
            )

        self._generative: Optional[LLMSummaryStep] = None
        if llm_client is not None:
            self._generative = LLMSummaryStep(
                client=llm_client,
                model=self.config.model,
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
                text_limit=self.config.text_limit,
            )
        self._fallback = HeuristicSummaryStep(
            max_keywords=self.config.max_keywords,
            summary_chars=self.config.summary_chars,
        )

    # -- strategy chain --------------------------------------------------

    def has_generative_backend(self) -> bool:
        return self._generative is not None

    async def try_generative(self, ctx: PageContext) -> Optional[EnrichmentResult]:
        """Run the LLM step; ``None`` if unavailable or unusable."""
        if self._generative is None:
            return None
        return await self._generative.run(ctx)

    async def run_fallback(self, ctx: PageContext) -> EnrichmentResult:
        return await self._fallback.run(ctx)

    # -- lookup ----------------------------------------------------------

    async def enrich(self, url: str) -> EnrichmentResult:
        """Produce an ``EnrichmentResult`` for *url*.

        Raises:
            InvalidInputError: *url* is missing, unparsable or not http(s).
                Raised before any network call.
            FetchFailedError: The page could not be fetched.
        """
        target = normalize_url(url)
        logger.info("Enriching %s", target)

        start = time.monotonic()
        strategy: str | None = None
        error: BaseException | None = None
        await _fire_hook(self.hooks.on_lookup_start, LookupStartEvent(url=target))

        try:
            page = await self.fetcher.fetch(target)
            await _fire_hook(
                self.hooks.on_fetch_complete,
                FetchCompleteEvent(
                    url=target,
                    status_code=page.status_code,
                    content_length=len(page.html),
                    fetched_at=page.fetched_at,
                ),
            )

            ctx = PageContext(
                url=target,
                html=page.html,
                text=extract_text(page.html, limit=self.config.text_limit),
                fetched_at=page.fetched_at,
            )

            if self.has_generative_backend():
                result = await self.try_generative(ctx)
                if result is not None:
                    strategy = self._generative.name
                    return result
                reason = "generative_failed"
            else:
                reason = "no_backend"

            logger.info("Using heuristic summary for %s (%s)", target, reason)
            await _fire_hook(
                self.hooks.on_strategy_fallback,
                StrategyFallbackEvent(url=target, reason=reason),
            )
            result = await self.run_fallback(ctx)
            strategy = self._fallback.name
            return result

        except BaseException as exc:
            error = exc
            raise

        finally:
            await _fire_hook(
                self.hooks.on_lookup_end,
                LookupEndEvent(
                    url=target,
                    strategy=strategy,
                    error=error,
                    elapsed_seconds=time.monotonic() - start,
                ),
            )
