# topmark:header:start
#
#   project      : CLIKit
#   file         : expand.py
#   file_relpath : src/clikit/cli/commands/expand.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLIKit `expand` command.

Reads a file (or STDIN) and replaces ``${NAME}`` placeholders. Values come from
``--var NAME=VALUE`` options first, then from the environment (unless
``--no-env``). Unknown names expand to empty text, or fail the command with
``--strict``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import click

from clikit import errors
from clikit.cli.errors import (
    ClikitDataError,
    ClikitFileNotFoundError,
    ClikitIOError,
    ClikitUsageError,
    from_library_error,
)
from clikit.config.logging import get_logger
from clikit.textutil import expand_variables

if TYPE_CHECKING:
    from collections.abc import Mapping

    from clikit.config.logging import ClikitLogger

logger: ClikitLogger = get_logger(__name__)


def parse_assignments(assignments: tuple[str, ...]) -> dict[str, str]:
    """Parse ``NAME=VALUE`` strings into a dict; later assignments win.

    Raises:
        ClikitUsageError: If an assignment has no ``=`` or an empty name.
    """
    variables: dict[str, str] = {}
    for item in assignments:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ClikitUsageError(f"Invalid --var {item!r}: expected NAME=VALUE.")
        variables[name] = value
    return variables


def read_source(source: Path) -> bytes:
    """Return the bytes of ``source``, or of STDIN when it is ``-``.

    Raises:
        ClikitFileNotFoundError: If ``source`` does not exist.
        ClikitIOError: If ``source`` cannot be read.
    """
    if str(source) == "-":
        return click.get_binary_stream("stdin").read()
    try:
        return source.read_bytes()
    except FileNotFoundError as e:
        raise ClikitFileNotFoundError(f"File not found: {source}") from e
    except OSError as e:
        raise ClikitIOError(f"Cannot read {source}: {e}") from e


class VariableLookup:
    """Mapping function for `expand_variables` that records unknown names."""

    def __init__(self, *sources: Mapping[str, str]) -> None:
        self.sources = sources
        self.missing: list[str] = []

    def __call__(self, name: str) -> str:
        for source in self.sources:
            if name in source:
                return source[name]
        if name not in self.missing:
            self.missing.append(name)
        return ""


@click.command(
    name="expand",
    help="Expand ${NAME} placeholders in FILE (or STDIN when FILE is '-').",
)
@click.argument(
    "source",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default="-",
)
@click.option(
    "--var",
    "assignments",
    multiple=True,
    metavar="NAME=VALUE",
    help="Define a variable. May be repeated; takes precedence over the environment.",
)
@click.option(
    "--no-env",
    is_flag=True,
    default=False,
    help="Do not look up variables in the environment.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail if a placeholder names an undefined variable.",
)
@click.pass_context
def expand_command(
    ctx: click.Context,
    source: Path,
    assignments: tuple[str, ...],
    no_env: bool,
    strict: bool,
) -> None:
    """Expand ``${NAME}`` placeholders and write the result to stdout."""
    variables = parse_assignments(assignments)
    lookup = VariableLookup(variables) if no_env else VariableLookup(variables, os.environ)

    data: bytes = read_source(source)
    expanded: bytes = expand_variables(data, lookup)
    logger.debug("Expanded %d bytes into %d bytes", len(data), len(expanded))

    if lookup.missing:
        op = errors.Op("cli.expand")
        undefined = errors.ErrorList(
            errors.new(errors.Kind.INVALID, f"undefined variable {name!r}", op)
            for name in lookup.missing
        )
        if strict:
            err = errors.wrap(errors.Kind.INVALID, "cannot expand input", op, undefined)
            verbose = ctx.obj.get("verbosity_level", 0) > 0
            raise from_library_error(err, detailed=verbose, cls=ClikitDataError)
        for problem in undefined:
            logger.warning("%s", problem)

    click.echo(expanded, nl=False)
