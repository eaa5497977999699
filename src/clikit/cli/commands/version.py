# topmark:header:start
#
#   project      : CLIKit
#   file         : version.py
#   file_relpath : src/clikit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLIKit `version` command.

Prints the current CLIKit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from clikit.constants import CLIKIT_VERSION

if TYPE_CHECKING:
    from clikit.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of CLIKit.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text, json).",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: str) -> None:
    """Show the current version of CLIKit.

    Args:
        ctx (click.Context): Current Click context carrying the console.
        output_format (str): ``"text"`` or ``"json"``.
    """
    console: ClickConsole = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": CLIKIT_VERSION}))
        return

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("CLIKit version:", bold=True, underline=True))
        console.print(f"    {console.styled(CLIKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(CLIKIT_VERSION, bold=True))
