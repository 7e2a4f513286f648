"""Centralized logging configuration for graphadt."""

import logging
import os
import sys
from typing import Optional

# Flag to track if we've already set up the package root logger
_ROOT_LOGGER_CONFIGURED = False

_ROOT_LOGGER_NAME = "graphadt"

# Environment variable naming a level (e.g. "DEBUG") applied at import
LOG_LEVEL_ENV_VAR = "GRAPHADT_LOG_LEVEL"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root graphadt logger with a single handler.

    Only the first call has an effect; later calls return immediately so that
    handlers are never duplicated.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stderr).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # A library writes diagnostics to stderr, leaving stdout to the caller
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    formatter = logging.Formatter(format_string)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Let logs propagate to the root logger so pytest can capture them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the graphadt root configuration.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Configured logger instance.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    # Child loggers carry no handlers of their own; level comes from the root
    logger.setLevel(logging.NOTSET)

    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all graphadt loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        handler.setLevel(level)


def configure_from_env() -> None:
    """Apply the level named by the GRAPHADT_LOG_LEVEL environment variable.

    Unknown level names fall back to INFO. Does nothing when the variable is
    unset or empty.
    """
    env_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if not env_level:
        return
    level_value = getattr(logging, env_level.upper(), logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    set_global_log_level(level_value)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
configure_from_env()
