"""
Configuration for the vcscout enrichment lookup.

All tunables live in a single dataclass with sensible defaults. The
OpenAI credential is injected here (usually via ``from_env``) and its
presence decides whether the generative strategy is available.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

_VALID_LOG_FORMATS = frozenset({"console", "json"})


@dataclass
class EnrichmentConfig:
    """
    Unified configuration for enrichment lookups.

    The instance is handed to ``EnrichmentService`` at construction;
    nothing in the package reads the environment after that.
    """

    # === Generative backend ===
    openai_api_key: Optional[str] = None
    """OpenAI credential. ``None`` disables the generative strategy"""

    openai_base_url: Optional[str] = None
    """Base URL for OpenAI-compatible chat completion endpoints"""

    model: str = "gpt-4o-mini"
    """Chat model used for summarization"""

    temperature: float = 0.7
    """LLM temperature (0.0-2.0)"""

    max_tokens: int = 1000
    """Maximum tokens for the LLM output"""

    llm_timeout: float = 30.0
    """Timeout for the summarization call in seconds"""

    # === Page fetch ===
    fetch_timeout: float = 10.0
    """Timeout for the page fetch in seconds"""

    user_agent: str = DEFAULT_USER_AGENT
    """User-Agent header sent with the page fetch"""

    # === Extraction ===
    text_limit: int = 5000
    """Characters of extracted page text handed to the summarizers"""

    summary_chars: int = 200
    """Characters of page text used for the heuristic summary"""

    max_keywords: int = 10
    """Number of keywords kept by the heuristic summary"""

    # === Logging ===
    log_level: str = "INFO"
    """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"""

    log_format: str = "console"
    """Log output format ("console" or "json")"""

    def __post_init__(self):
        """Validate configuration values after initialization."""
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError(f"temperature must be between 0.0 and 2.0, got {self.temperature}")

        if self.max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")

        if self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive, got {self.fetch_timeout}")

        if self.llm_timeout <= 0:
            raise ValueError(f"llm_timeout must be positive, got {self.llm_timeout}")

        if self.text_limit <= 0:
            raise ValueError(f"text_limit must be positive, got {self.text_limit}")

        if self.summary_chars <= 0:
            raise ValueError(f"summary_chars must be positive, got {self.summary_chars}")

        if self.max_keywords <= 0:
            raise ValueError(f"max_keywords must be positive, got {self.max_keywords}")

        if self.log_format not in _VALID_LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {sorted(_VALID_LOG_FORMATS)}, got {self.log_format!r}"
            )

        # Blank credentials count as absent
        if self.openai_api_key is not None and not self.openai_api_key.strip():
            self.openai_api_key = None

    @property
    def has_openai_key(self) -> bool:
        return self.openai_api_key is not None

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides) -> 'EnrichmentConfig':
        """Build a configuration from environment variables.

        Loads a ``.env`` file first (without overriding variables that are
        already set). Keyword arguments win over the environment.
        """
        load_dotenv(dotenv_path)

        values = dict(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
            model=os.getenv("VCSCOUT_MODEL", cls.model),
            fetch_timeout=float(os.getenv("VCSCOUT_FETCH_TIMEOUT", cls.fetch_timeout)),
            llm_timeout=float(os.getenv("VCSCOUT_LLM_TIMEOUT", cls.llm_timeout)),
            log_level=os.getenv("VCSCOUT_LOG_LEVEL", cls.log_level),
        )
        values.update(overrides)
        return cls(**values)

    @classmethod
    def for_development(cls, **overrides) -> 'EnrichmentConfig':
        """Create configuration optimized for development."""
        values = dict(
            fetch_timeout=20.0,  # Slow local tunnels
            llm_timeout=60.0,
            log_level="DEBUG",
        )
        values.update(overrides)
        return cls(**values)

    @classmethod
    def for_production(cls, **overrides) -> 'EnrichmentConfig':
        """Create configuration optimized for production services."""
        values = dict(
            temperature=0.3,    # More stable summaries
            llm_timeout=20.0,   # Bound request latency
            log_level="INFO",
            log_format="json",  # Structured logs for aggregation
        )
        values.update(overrides)
        return cls(**values)
