"""Logging setup for tabsql.

Modules log through ``logging.getLogger(__name__)``; this module only
attaches a handler to the ``tabsql`` logger, in text or JSON format.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """Configure the ``tabsql`` logger.

    Args:
        level: Log level name (defaults to TABSQL_LOG_LEVEL)
        fmt: "text" or "json" (defaults to TABSQL_LOG_FORMAT)

    Returns:
        The configured ``tabsql`` logger
    """
    from tabsql.core.config import config

    level = (level or config.log_level).upper()
    fmt = fmt or config.log_format

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger = logging.getLogger("tabsql")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
