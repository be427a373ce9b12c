"""Tests for logging configuration."""

from __future__ import annotations

import io
import logging

import orjson

from cordkit.foundation.config import LoggingSettings
from cordkit.foundation.logging import configure_logging


def test_json_format() -> None:
    out = io.StringIO()
    logger = configure_logging(LoggingSettings(level="DEBUG", format="json"), output=out)
    logging.getLogger("cordkit.caching").debug("Cache hit: Channel:1")
    record = orjson.loads(out.getvalue().splitlines()[-1])
    assert record["level"] == "DEBUG"
    assert record["logger"] == "cordkit.caching"
    assert record["event"] == "Cache hit: Channel:1"
    assert logger.level == logging.DEBUG


def test_reconfigure_replaces_handler() -> None:
    configure_logging(LoggingSettings(), output=io.StringIO())
    out = io.StringIO()
    logger = configure_logging(LoggingSettings(level="WARNING"), output=out)
    owned = [h for h in logger.handlers if getattr(h, "_cordkit", False)]
    assert len(owned) == 1
    logging.getLogger("cordkit.rest.http").info("quiet")
    logging.getLogger("cordkit.rest.http").warning("loud")
    assert "quiet" not in out.getvalue()
    assert "cordkit.rest.http: loud" in out.getvalue()
