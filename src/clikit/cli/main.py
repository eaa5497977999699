# topmark:header:start
#
#   project      : CLIKit
#   file         : main.py
#   file_relpath : src/clikit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the CLIKit command line.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` so subcommands share the same console and settings.
"""

from __future__ import annotations

import click

from clikit import color
from clikit.cli.commands.expand import expand_command
from clikit.cli.commands.spin import spin_command
from clikit.cli.commands.version import version_command
from clikit.cli.console import ClickConsole
from clikit.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from clikit.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    color.set_enabled(enable_color)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CLIKit: spinner, color and text-expansion utilities for command-line tools.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the CLIKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'clikit spin' to see the spinner in action.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(expand_command)

cli.add_command(spin_command)

if __name__ == "__main__":
    cli()
