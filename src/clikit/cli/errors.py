# topmark:header:start
#
#   project      : CLIKit
#   file         : errors.py
#   file_relpath : src/clikit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CLIKit CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors ([`clikit.errors.Error`][clikit.errors.model.Error])
    are converted with [`from_library_error`][clikit.cli.errors.from_library_error].

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from clikit import errors
from clikit.cli.exit_codes import ExitCode


class ClikitError(click.ClickException):
    """Base class for all CLIKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ClikitUsageError(ClikitError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ClikitDataError(ClikitError):
    """Error for invalid input data."""

    exit_code = ExitCode.DATA_ERROR


class ClikitFileNotFoundError(ClikitError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ClikitIOError(ClikitError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class ClikitConfigError(ClikitError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def from_library_error(
    err: errors.Error,
    *,
    detailed: bool = False,
    cls: type[ClikitError] = ClikitError,
) -> ClikitError:
    """Convert a library error into a CLI error.

    Args:
        err (errors.Error): The error raised by library code.
        detailed (bool): Render operation labels and nested causes
            (`Error.detailed`) instead of the short form.
        cls (type[ClikitError]): CLI error class to instantiate.

    Returns:
        ClikitError: The CLI error, ready to raise.
    """
    return cls(err.detailed() if detailed else str(err))
