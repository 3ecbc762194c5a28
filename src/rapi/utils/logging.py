"""Logging utilities for rapi."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from ..config import LoggingSettings
from ..constants import LOGGER_NAME


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def format(self, record):
        return json.dumps({
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
        })


def setup_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Attach a stdout handler to the rapi logger.

    Calling this more than once replaces the handler installed by the
    previous call instead of adding another one.

    Args:
        settings: Logging settings; read from the environment when omitted

    Returns:
        The configured ``rapi`` logger
    """
    settings = settings or LoggingSettings()
    level = getattr(logging, settings.log_level.upper())

    if settings.log_format == "json":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, "_rapi_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler._rapi_handler = True

    logger.setLevel(level)
    logger.addHandler(handler)

    return logger
