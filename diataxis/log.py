"""Logging setup for the diataxis command line.

Library modules log through ``logging.getLogger(__name__)``; only the CLI
installs a handler. Level resolution, highest priority first:

- explicit ``--verbose`` / ``--quiet`` flags
- ``DIATAXIS_LOG_LEVEL`` (DEBUG, INFO, WARN, ERROR, FATAL)
- ``DIATAXIS_QUIET=true``
- INFO
"""

import logging
import os
import sys

LOGGER_NAME = "diataxis"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
}


class CliFormatter(logging.Formatter):
    """Plain messages for INFO, ``[LEVEL]`` prefix for everything else."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno == logging.INFO:
            return message
        return f"[{record.levelname}] {message}"


def determine_level(verbose: bool = False, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING

    env_level = os.environ.get("DIATAXIS_LOG_LEVEL")
    if env_level:
        return _LEVELS.get(env_level.strip().upper(), logging.INFO)
    if os.environ.get("DIATAXIS_QUIET", "").strip().lower() == "true":
        return logging.WARNING
    return logging.INFO


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach a stdout handler to the package logger and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    level = determine_level(verbose, quiet)

    handler = next((h for h in logger.handlers if getattr(h, "_diataxis_cli", False)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler._diataxis_cli = True  # type: ignore[attr-defined]
        handler.setFormatter(CliFormatter())
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stdout)

    logger.setLevel(level)
    return logger
