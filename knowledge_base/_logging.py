"""Logging configuration for knowledge_base.

Usage in other modules:
    import logging
    log = logging.getLogger(__name__)

The log level can be configured via the KNOWLEDGE_BASE_LOG_LEVEL environment
variable (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
"""

import logging
import os
import sys

LOG_LEVEL_ENV = "KNOWLEDGE_BASE_LOG_LEVEL"

# Loggers of the root-level front-end modules share the package handler.
_LOGGER_NAMES = ("knowledge_base", "controller", "view")


def configure_logging() -> None:
    """Configure logging for the application.

    Call this once at startup (main.py or the CLI). Subsequent calls are
    no-ops.
    """
    package_logger = logging.getLogger("knowledge_base")
    if package_logger.handlers:
        return

    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="[%(levelname)s] %(name)s: %(message)s",
    ))

    for name in _LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.addHandler(handler)
        # Avoid duplicate messages through the root logger
        logger.propagate = False
