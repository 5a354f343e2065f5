"""Observability logger utilities.

Provides:
- ``get_logger``: standard human-readable logger on stderr.
- ``set_log_level``: adjust the package log level after startup
  (``--verbose`` / ``observability.log_level``).

User-facing progress lines are printed by the drivers, never logged, so the
stdout/stderr contract of each CLI mode does not depend on logging settings.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
ROOT_LOGGER_NAME = "codegen_split"


def _level_from_name(log_level: Optional[str]) -> int:
    if log_level:
        return getattr(logging, log_level.upper(), logging.INFO)
    return logging.INFO


def get_logger(name: str = ROOT_LOGGER_NAME, log_level: Optional[str] = None) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Logger name.
        log_level: Optional log level string (e.g., "INFO").

    Returns:
        Configured logger instance.
    """

    logging.basicConfig(
        level=_level_from_name(log_level),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    return logging.getLogger(name)


def set_log_level(log_level: Optional[str]) -> None:
    """Apply *log_level* to the package logger hierarchy."""

    logging.getLogger(ROOT_LOGGER_NAME).setLevel(_level_from_name(log_level))
