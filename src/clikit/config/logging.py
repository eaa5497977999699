# topmark:header:start
#
#   project      : CLIKit
#   file         : logging.py
#   file_relpath : src/clikit/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLIKit logging: a TRACE level below DEBUG and level-colored output.

Modules obtain their logger with ``logger = get_logger(__name__)``. The CLI
calls `setup_logging` once; the level comes from ``CLIKIT_LOG_LEVEL`` and
defaults to CRITICAL so diagnostics stay out of program output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Final, cast

import click

from clikit.constants import LOG_LEVEL_ENV_VAR

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

logging.addLevelName(TRACE_LEVEL, "TRACE")

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

# Lowest level first; a record takes the color of the highest threshold it reaches
_LEVEL_COLORS: Final[tuple[tuple[int, str], ...]] = (
    (TRACE_LEVEL, "blue"),
    (logging.DEBUG, "bright_black"),
    (logging.INFO, "green"),
    (logging.WARNING, "yellow"),
    (logging.ERROR, "red"),
    (logging.CRITICAL, "bright_red"),
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ClikitLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` with severity TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.setLoggerClass(ClikitLogger)


class StyledFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colored message.
        """
        message = super().format(record)
        fg = None
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                fg = color
        if fg is None:
            return click.style(message, fg="red", dim=True)
        return click.style(message, fg=fg)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``CLIKIT_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names in any case (``"trace"``, ``"DEBUG"``) and numbers (``"15"``).
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stdout handler on the root logger.

    Args:
        level (int | None): Log level; when None, `resolve_env_log_level` is
            consulted and CRITICAL is used if that yields nothing.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace existing handlers so repeated setup does not duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    # Source locations help below INFO only
    handler.setFormatter(StyledFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> ClikitLogger:
    """Return the `ClikitLogger` called ``name``."""
    return cast("ClikitLogger", logging.getLogger(name))
