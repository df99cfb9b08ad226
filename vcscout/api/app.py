"""FastAPI surface for the enrichment lookup.

``GET /api/enrich?url=...`` returns the camelCase ``EnrichmentResult``
or a JSON error body:

- 400 ``{"error": ...}`` for a missing, malformed or non-http(s) URL
- 500 ``{"error": "Failed to enrich company data", "message": ...}`` for
  fetch failures and unexpected errors
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from ..core.config import EnrichmentConfig
from ..core.exceptions import FetchFailedError, InvalidInputError
from ..core.service import EnrichmentService
from ..schemas.enrichment import EnrichmentResult
from ..utils.logger import get_logger, setup_logging
from ..utils.urls import URL_REQUIRED

logger = get_logger(__name__)

ENRICH_FAILED = "Failed to enrich company data"


def create_app(
    service: Optional[EnrichmentService] = None,
    config: Optional[EnrichmentConfig] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """Build the API application.

    Args:
        service: Lookup service to serve. Built from *config* (or
            ``EnrichmentConfig.from_env()``) on first request when omitted.
        config: Configuration used when *service* is not given.
        configure_logging: Attach the package log handler using the
            configuration's level and format.
    """
    app = FastAPI(title="vcscout", version="0.1.0")
    app.state.service = service
    app.state.config = config

    if configure_logging:
        cfg = config or (service.config if service is not None else EnrichmentConfig.from_env())
        app.state.config = app.state.config or cfg
        setup_logging(level=cfg.log_level, format_type=cfg.log_format)

    def _get_service() -> EnrichmentService:
        if app.state.service is None:
            app.state.service = EnrichmentService(
                app.state.config or EnrichmentConfig.from_env()
            )
        return app.state.service

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/api/enrich", response_model=EnrichmentResult)
    async def enrich(url: Optional[str] = Query(default=None)):
        if not url:
            return JSONResponse({"error": URL_REQUIRED}, status_code=400)

        try:
            result = await _get_service().enrich(url)
        except InvalidInputError as exc:
            return JSONResponse({"error": exc.message}, status_code=400)
        except FetchFailedError as exc:
            return JSONResponse(
                {"error": ENRICH_FAILED, "message": exc.message},
                status_code=500,
            )
        except Exception as exc:
            logger.exception("Enrichment error for %s", url)
            return JSONResponse(
                {"error": ENRICH_FAILED, "message": str(exc) or "Unknown error"},
                status_code=500,
            )

        return JSONResponse(result.to_dict())

    return app
