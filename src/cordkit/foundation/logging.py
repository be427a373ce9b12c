"""Logging setup for the ``cordkit`` logger hierarchy.

Library modules log through ``logging.getLogger("cordkit.<area>")`` and never
configure handlers themselves. Applications call ``configure_logging`` once
(or wire the loggers into their own setup).
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

import orjson

if TYPE_CHECKING:
    from .config import LoggingSettings

ROOT_LOGGER = "cordkit"


class JsonFormatter(logging.Formatter):
    """One JSON object per line for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, option=orjson.OPT_NON_STR_KEYS).decode()


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    output: TextIO | None = None,
) -> logging.Logger:
    """Attach a single stream handler to the ``cordkit`` logger.

    Calling it again replaces the previous handler instead of stacking a new one.
    """
    if settings is None:
        from .config import get_settings
        settings = get_settings().logging

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_cordkit", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(output or sys.stderr)
    handler._cordkit = True  # type: ignore[attr-defined]
    if settings.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.level))
    return logger
