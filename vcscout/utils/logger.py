"""Logging helpers for vcscout.

``get_logger`` is used at module level everywhere in the package;
``setup_logging`` is for applications (the API app and example scripts)
and configures the ``vcscout`` logger hierarchy once.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

_ROOT_LOGGER = "vcscout"
_HANDLER_NAME = "vcscout-handler"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def __init__(self, include_timestamp: bool = True):
        super().__init__()
        self.include_timestamp = include_timestamp

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.include_timestamp:
            payload["timestamp"] = datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat()
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return a logger; module names outside the package are nested under it."""
    if name != _ROOT_LOGGER and not name.startswith(_ROOT_LOGGER + "."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: str = "INFO",
    format_type: str = "console",
    include_timestamp: bool = True,
) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again replaces the previous handler instead of stacking
    duplicates (uvicorn reload re-imports the app module).

    Args:
        level: Logging level name.
        format_type: ``"console"`` for human-readable lines, ``"json"`` for
            one JSON object per line.
        include_timestamp: Prefix records with the time.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if format_type == "json":
        handler.setFormatter(JsonFormatter(include_timestamp=include_timestamp))
    else:
        fmt = "[%(levelname)s] %(name)s :: %(message)s"
        if include_timestamp:
            fmt = "[%(levelname)s] %(asctime)s %(name)s :: %(message)s"
        handler.setFormatter(logging.Formatter(fmt, "%H:%M:%S"))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
