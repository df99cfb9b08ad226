"""
Custom exceptions for the vcscout enrichment lookup.

Only ``InvalidInputError`` and ``FetchFailedError`` ever escape
``EnrichmentService.enrich()``; everything that goes wrong inside the
generative step is absorbed and degrades to the heuristic summary.
"""

from __future__ import annotations


class EnrichmentError(Exception):
    """Base exception for all enrichment-related errors.

    Attributes:
        message: Human-readable error description.
        url: URL being enriched (``None`` if not known yet).
    """

    def __init__(self, message: str, url: str | None = None):
        self.message = message
        self.url = url

        error_parts = [message]
        if url is not None:
            error_parts.append(f"URL: {url}")

        super().__init__(" | ".join(error_parts))


class InvalidInputError(EnrichmentError):
    """Raised when the lookup URL is missing, unparsable, or not http(s).

    ``message`` is one of the user-facing strings rendered by the API
    (``"URL parameter is required"``, ``"Invalid URL format"``,
    ``"Only HTTP/HTTPS URLs are allowed"``).
    """

    pass


class FetchFailedError(EnrichmentError):
    """Raised when the target page could not be fetched.

    Covers network errors, timeouts and non-2xx responses.

    Attributes:
        status_code: HTTP status of the failed response (``None`` for
            transport-level failures).
    """

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message, url=url)


class ConfigurationError(EnrichmentError):
    """Raised when configuration is invalid."""

    pass
