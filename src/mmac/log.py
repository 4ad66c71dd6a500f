"""Logging setup for the mmac command line.

The library only creates module loggers under ``mmac``; handlers are
installed here, by the CLI.

Environment variables:
    MMAC_LOG_LEVEL — level name or number (default: WARNING)
"""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER_NAME = "mmac"
LOG_LEVEL_ENV = "MMAC_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_handler: logging.Handler | None = None


def resolve_env_log_level() -> int | None:
    """Return the level named by MMAC_LOG_LEVEL, or None if unset or invalid."""
    val = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not val:
        return None
    if val.isdigit():
        return int(val)
    level = logging.getLevelName(val)
    return level if isinstance(level, int) else None


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``mmac`` logger.

    ``verbose`` forces DEBUG; otherwise MMAC_LOG_LEVEL, else WARNING.
    Calling it again replaces the previous handler.
    """
    global _handler
    if verbose:
        level = logging.DEBUG
    else:
        level = resolve_env_log_level() or logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(
        logging.Formatter(DEBUG_LOG_FORMAT if level <= logging.DEBUG else LOG_FORMAT)
    )
    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
