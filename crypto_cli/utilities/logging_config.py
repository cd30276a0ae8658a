"""
Logging configuration for the Crypto CLI.

Logs go to stderr so that command output on stdout stays clean.
"""

import logging
import os
import sys

ENV_LOG_LEVEL = "CRYPTO_CLI_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level: str | None = None) -> int:
    """Resolve a level name (argument, then environment, then default) to a logging level."""
    name = (level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        return logging.WARNING
    return resolved


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the package logger.

    Installs a single stderr handler on the ``crypto_cli`` logger. Calling
    it again replaces the handler rather than stacking duplicates.

    Args:
        level: Level name such as "DEBUG"; falls back to CRYPTO_CLI_LOG_LEVEL

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("crypto_cli")
    logger.setLevel(resolve_log_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug(f"Logging initialized at {logging.getLevelName(logger.level)}")
    return logger
