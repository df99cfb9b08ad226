"""LLMSummaryStep — summarizes page text with a chat completion model."""

from __future__ import annotations

import json
from typing import Optional

from pydantic import ValidationError

from ..schemas.enrichment import EnrichmentResult, GeneratedSummary
from ..utils.logger import get_logger
from .base import PageContext
from .heuristic import default_signals
from .providers.base import LLMAPIError, LLMClient

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are an expert at analyzing company websites and extracting structured "
    "information. Extract key information about the company from the provided "
    "website content."
)

USER_PROMPT_TEMPLATE = """\
Analyze this company website content and extract:
1. A 1-2 sentence summary of what the company does
2. 3-6 bullet points describing what they do
3. 5-10 relevant keywords
4. 2-4 derived signals (e.g., "careers page exists", "recent blog post", \
"changelog present", "product launch", etc.) with confidence levels

Website content (first {limit} chars):
{text}

Respond in JSON format:
{{
  "summary": "...",
  "whatTheyDo": ["...", "..."],
  "keywords": ["...", "..."],
  "signals": [
    {{"type": "...", "description": "...", "confidence": "high|medium|low"}}
  ]
}}"""


class LLMSummaryStep:
    """Produces an ``EnrichmentResult`` from an LLM summary of the page.

    A single attempt is made. Transport failures, empty content, content
    that is not a JSON object, and fields of the wrong shape are logged and
    reported as ``None`` so the caller can fall back to the heuristic step.
    """

    name = "generative"

    def __init__(
        self,
        client: LLMClient,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: int = 1000,
        text_limit: int = 5000,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.text_limit = text_limit

    def build_messages(self, ctx: PageContext) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": USER_PROMPT_TEMPLATE.format(limit=self.text_limit, text=ctx.text),
            },
        ]

    async def run(self, ctx: PageContext) -> Optional[EnrichmentResult]:
        try:
            response = await self.client.complete(
                messages=self.build_messages(ctx),
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"},
            )
        except LLMAPIError as exc:
            logger.warning(
                "LLM summary request failed for %s (status=%s): %s",
                ctx.url, exc.status_code, exc,
            )
            return None

        if not response.content:
            logger.warning("LLM summary for %s returned empty content", ctx.url)
            return None

        try:
            parsed = json.loads(response.content)
        except json.JSONDecodeError as exc:
            logger.warning("Failed to parse LLM summary for %s: %s", ctx.url, exc)
            return None

        if not isinstance(parsed, dict):
            logger.warning(
                "LLM summary for %s is a JSON %s, expected an object",
                ctx.url, type(parsed).__name__,
            )
            return None

        try:
            generated = GeneratedSummary.model_validate(parsed)
        except ValidationError as exc:
            logger.warning(
                "LLM summary for %s has malformed fields: %d error(s)",
                ctx.url, exc.error_count(),
            )
            return None

        if response.usage is not None:
            logger.debug(
                "LLM summary for %s used %d tokens", ctx.url, response.usage.total_tokens
            )

        return EnrichmentResult(
            summary=generated.summary_text,
            what_they_do=generated.what_they_do,
            keywords=generated.keywords,
            signals=generated.signals or default_signals(),
            sources=[ctx.source()],
            enriched_at=ctx.fetched_at,
        )
