"""
Logging setup shared by the CLI and the HTTP service.
Log records go to stderr; stdout is reserved for generated text.
"""
import logging
import sys
from typing import Optional

from gibberish.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PACKAGE_LOGGER = "gibberish"


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Return the logger for ``name``.

    The stderr handler lives on the package logger only, so module loggers
    (gibberish.cli, gibberish.services.walker, ...) share it through propagation.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel((level or settings.LOG_LEVEL).upper())
    return logging.getLogger(name)
