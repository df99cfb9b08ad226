"""Plain-text extraction from fetched HTML."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_WHITESPACE = re.compile(r"\s+")
_SKIP_ELEMENTS = ["script", "style"]


def extract_text(html: str, limit: int = 5000) -> str:
    """Return the visible text of *html*, whitespace-collapsed and truncated.

    ``<script>`` and ``<style>`` elements are dropped with their content;
    every other tag is replaced by a space.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    for element in soup.find_all(_SKIP_ELEMENTS):
        element.decompose()

    text = soup.get_text(separator=" ")
    text = _WHITESPACE.sub(" ", text).strip()
    return text[:limit]
