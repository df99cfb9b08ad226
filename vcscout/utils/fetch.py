"""Page fetcher — one GET per lookup, no retries."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import httpx

from ..core.config import DEFAULT_USER_AGENT
from ..core.exceptions import FetchFailedError
from .logger import get_logger

logger = get_logger(__name__)


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, ``Z`` suffixed."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class FetchedPage:
    """Raw result of a successful page fetch.

    Attributes:
        url: URL that was requested (normalized).
        status_code: Final HTTP status (2xx).
        html: Full response body as text.
        fetched_at: Timestamp taken once the body was read.
    """

    url: str
    status_code: int
    html: str
    fetched_at: str


class PageFetcher:
    """Fetches a single page with a browser User-Agent and a hard timeout.

    Args:
        timeout: Seconds allowed for the whole request.
        user_agent: Value of the ``User-Agent`` header.
        transport: Optional httpx transport (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    async def fetch(self, url: str) -> FetchedPage:
        """GET *url* and return its body.

        The timeout covers connecting, the response headers and the full
        body read; a server trickling bytes still fails at ``timeout``.

        Raises:
            FetchFailedError: transport error, timeout, or non-2xx status.
        """
        try:
            status_code, html = await asyncio.wait_for(self._get(url), self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("Fetch timed out after %.1fs: %s", self.timeout, url)
            raise FetchFailedError(
                f"Request timed out after {self.timeout:g}s", url=url
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Fetch failed for %s: %s", url, exc)
            raise FetchFailedError(str(exc) or type(exc).__name__, url=url) from exc

        if not 200 <= status_code < 300:
            logger.warning("Fetch returned HTTP %d for %s", status_code, url)
            raise FetchFailedError(
                f"HTTP error! status: {status_code}",
                url=url,
                status_code=status_code,
            )

        return FetchedPage(
            url=url,
            status_code=status_code,
            html=html,
            fetched_at=utc_timestamp(),
        )

    async def _get(self, url: str) -> tuple[int, str]:
        async with httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(url)
            if not response.is_success:
                return response.status_code, ""
            return response.status_code, response.text
