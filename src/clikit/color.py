# topmark:header:start
#
#   project      : CLIKit
#   file         : color.py
#   file_relpath : src/clikit/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI foreground colors for strings.

One function per basic terminal color wraps a string in the color's start code
and the default-foreground reset code (``ESC[39m``)::

    >>> red("uh oh")
    '\\x1b[31muh oh\\x1b[39m'

Reset codes already present inside the string are removed first, so a
partially colored string cannot end the outer color early.

Coloring is a process-wide switch: see [`set_enabled`][clikit.color.set_enabled].
The ``NO_COLOR`` environment variable (any value, see https://no-color.org)
disables coloring at import time and takes precedence over ``set_enabled``.
"""

from __future__ import annotations

import os
from typing import Final

import click

from clikit.constants import NO_COLOR_ENV_VAR

FG_RESET: Final[str] = "\x1b[39m"

_no_color: bool = False
_enabled: bool = True


def _init_from_env() -> None:
    """Initialize the global switch from the environment."""
    global _no_color, _enabled
    # The standard says the value doesn't matter, only whether or not it's set
    _no_color = NO_COLOR_ENV_VAR in os.environ
    _enabled = not _no_color


_init_from_env()


def set_enabled(enabled: bool) -> None:
    """Enable or disable coloring globally.

    Does nothing when ``NO_COLOR`` is set, as ``NO_COLOR`` takes precedence.

    Args:
        enabled (bool): Whether color functions should emit ANSI codes.
    """
    global _enabled
    if _no_color:
        return
    _enabled = enabled


def is_enabled() -> bool:
    """Return whether color functions currently emit ANSI codes."""
    return _enabled


def _apply(text: str, fg: str) -> str:
    if not _enabled:
        return text
    sanitized = text.replace(FG_RESET, "")
    return click.style(sanitized, fg=fg, reset=False) + FG_RESET


def black(text: str) -> str:
    """Return ``text`` with a black foreground."""
    return _apply(text, "black")


def red(text: str) -> str:
    """Return ``text`` with a red foreground."""
    return _apply(text, "red")


def green(text: str) -> str:
    """Return ``text`` with a green foreground."""
    return _apply(text, "green")


def yellow(text: str) -> str:
    """Return ``text`` with a yellow foreground."""
    return _apply(text, "yellow")


def blue(text: str) -> str:
    """Return ``text`` with a blue foreground."""
    return _apply(text, "blue")


def magenta(text: str) -> str:
    """Return ``text`` with a magenta foreground."""
    return _apply(text, "magenta")


def cyan(text: str) -> str:
    """Return ``text`` with a cyan foreground."""
    return _apply(text, "cyan")


def white(text: str) -> str:
    """Return ``text`` with a white foreground."""
    return _apply(text, "white")
