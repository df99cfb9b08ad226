"""
Core functionality for the vcscout enrichment lookup.
"""

from .config import EnrichmentConfig
from .exceptions import (
    ConfigurationError,
    EnrichmentError,
    FetchFailedError,
    InvalidInputError,
)
from .hooks import EnrichmentHooks
from .service import EnrichmentService

__all__ = [
    'EnrichmentService',
    'EnrichmentConfig',
    'EnrichmentHooks',
    'EnrichmentError',
    'InvalidInputError',
    'FetchFailedError',
    'ConfigurationError',
]
