"""HTTP API for the enrichment lookup."""

from .app import create_app

__all__ = ["create_app"]
