# topmark:header:start
#
#   project      : CLIKit
#   file         : options.py
#   file_relpath : src/clikit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the CLIKit command line.

This module centralizes reusable options (verbosity, color) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from clikit.cli.errors import ClikitUsageError
from clikit.constants import FORCE_COLOR_ENV_VAR, NO_COLOR_ENV_VAR

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: ``verbose_count`` when positive, ``-quiet_count`` when quiet,
        otherwise 0.

    Raises:
        ClikitUsageError: If both verbose and quiet flags are used simultaneously.
    """
    # They are mutually exclusive
    if verbose_count > 0 and quiet_count > 0:
        raise ClikitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
        3. **Auto**: If none of the above decide, return ``stdout.isatty()``.

    Args:
        cli_mode (ColorMode | str | None): Parsed value from ``--color``; ``None``
            means "not provided".
        stdout_isatty (bool | None): Optional override for TTY detection. When
            ``None``, the function calls ``sys.stdout.isatty()``.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv(FORCE_COLOR_ENV_VAR)
    if force_color and force_color != "0":
        return True
    if os.getenv(NO_COLOR_ENV_VAR) is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f
