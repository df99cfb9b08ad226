"""
vcscout - Company Website Enrichment

Fetches a venture-backed company's website and returns a structured
summary (activities, keywords, hiring/content signals), using an LLM when
one is configured and a deterministic heuristic otherwise.
"""

# Import main classes for clean public API
from .core import (
    ConfigurationError,
    EnrichmentConfig,
    EnrichmentError,
    EnrichmentHooks,
    EnrichmentService,
    FetchFailedError,
    InvalidInputError,
)
from .schemas import EnrichmentResult, Signal, Source

__version__ = "0.1.0"

__all__ = [
    'EnrichmentService',
    'EnrichmentConfig',
    'EnrichmentHooks',
    'EnrichmentResult',
    'Signal',
    'Source',
    'EnrichmentError',
    'InvalidInputError',
    'FetchFailedError',
    'ConfigurationError',
]
