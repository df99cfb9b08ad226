"""Helpers shared by the lookup steps."""

from .fetch import FetchedPage, PageFetcher, utc_timestamp
from .html import extract_text
from .logger import get_logger, setup_logging
from .urls import normalize_url

__all__ = [
    "FetchedPage",
    "PageFetcher",
    "utc_timestamp",
    "extract_text",
    "get_logger",
    "setup_logging",
    "normalize_url",
]
