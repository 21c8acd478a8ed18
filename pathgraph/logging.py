"""Centralized logging configuration for pathgraph.

Every module logs through ``get_logger(__name__)``. Records flow to one handler
on the ``pathgraph`` logger, which writes to stderr so that result tables and
JSON printed by the CLI stay alone on stdout.

The initial level is INFO unless the ``PATHGRAPH_LOG_LEVEL`` environment
variable names another one (``DEBUG``, ``WARNING``, ...).
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathgraph"

#: Environment variable read once, when the root logger is first configured.
LOG_LEVEL_ENV = "PATHGRAPH_LOG_LEVEL"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _level_from_env(default: int) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``pathgraph`` logger.

    Only the first call has an effect; use ``reset_logging`` to start over.

    Args:
        level: Logging level; defaults to ``PATHGRAPH_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(_level_from_env(logging.INFO) if level is None else level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the ``pathgraph`` hierarchy.

    Child loggers carry no handlers or level of their own; both come from the
    package logger.

    Args:
        name: Logger name, normally the calling module's ``__name__``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def level_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI ``--verbose`` / ``--quiet`` switches to a level.

    ``verbose`` wins when both are set.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next setup starts clean (for tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
