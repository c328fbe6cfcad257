"""Centralized logging configuration for taskorder.

Usage:
    from taskorder.logger import configure_logging, get_logger

    # Configure once at application startup (the CLI does this)
    configure_logging(level="DEBUG")

    # Get loggers in modules
    logger = get_logger(__name__)

Environment Variables:
    TASKORDER_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER_NAME = "taskorder"
DEFAULT_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the taskorder hierarchy.

    Module names already start with ``taskorder``; anything else is nested
    under it so that one level setting covers every logger we create.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the taskorder logger and set its level.

    Args:
        level: Log level name. Falls back to TASKORDER_LOG_LEVEL, then WARNING.

    Returns:
        The configured root taskorder logger.

    Raises:
        ConfigurationError: If the level name is not one of LOG_LEVELS

    Calling this again replaces the level and rebinds the handler to the
    current sys.stderr, but never adds a second handler.
    """
    global _handler

    level_name = (level or os.environ.get("TASKORDER_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    if level_name not in LOG_LEVELS:
        # Imported here: taskorder.core modules import this module at load time
        from taskorder.core.errors import ConfigurationError

        raise ConfigurationError(
            f"Invalid log level: {level_name!r}",
            what=f"Invalid log level {level_name!r}",
            why=f"Supported levels are {', '.join(LOG_LEVELS)}",
            how_to_fix="Set TASKORDER_LOG_LEVEL to one of the supported levels",
        )

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(_handler)
    else:
        _handler.setStream(sys.stderr)
    root.setLevel(level_name)
    return root


__all__ = ["get_logger", "configure_logging", "LOG_LEVELS"]
