# topmark:header:start
#
#   project      : CLIKit
#   file         : spin.py
#   file_relpath : src/clikit/cli/commands/spin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLIKit `spin` command.

Runs the terminal spinner over a number of simulated steps. Spinner settings
are read from the nearest ``clikit.toml`` / ``[tool.clikit.spinner]`` (or
``--config``) and then overridden by command-line options.
"""

from __future__ import annotations

import time
from contextlib import ExitStack
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import click

from clikit import color, errors
from clikit.cli.errors import ClikitConfigError, ClikitIOError, from_library_error
from clikit.config.loaders import resolve_spinner_config
from clikit.config.logging import get_logger
from clikit.spinner import Spinner

if TYPE_CHECKING:
    from clikit.config.logging import ClikitLogger
    from clikit.spinner import SpinnerConfig

logger: ClikitLogger = get_logger(__name__)


@click.command(
    name="spin",
    help="Show a progress spinner over COUNT simulated steps.",
)
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=10,
    show_default=True,
    help="Number of simulated steps.",
)
@click.option(
    "--interval",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds between animation frames (default: config or 0.1).",
)
@click.option(
    "--step-delay",
    type=click.FloatRange(min=0),
    default=0.3,
    show_default=True,
    help="Seconds each simulated step takes.",
)
@click.option(
    "--message",
    default=None,
    help="Message shown when the spinner starts.",
)
@click.option(
    "--stop-message",
    default=None,
    help="Message printed in place of the spinner when done.",
)
@click.option(
    "--debug-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write every message the spinner showed to this file.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read spinner settings from this TOML file instead of discovering one.",
)
@click.pass_context
def spin_command(
    ctx: click.Context,
    count: int,
    interval: float | None,
    step_delay: float,
    message: str | None,
    stop_message: str | None,
    debug_file: Path | None,
    config_path: Path | None,
) -> None:
    """Run the spinner over ``count`` simulated steps."""
    verbose = ctx.obj.get("verbosity_level", 0) > 0
    try:
        cfg: SpinnerConfig = resolve_spinner_config(config_path)
    except errors.Error as e:
        raise from_library_error(e, detailed=verbose, cls=ClikitConfigError) from e

    cfg = cfg.with_overrides(
        count=count,
        interval=interval,
        start_message=message,
        stop_message=stop_message,
    )
    if not cfg.stop_message:
        cfg = cfg.with_overrides(stop_message=color.green(f"Completed {count} steps"))

    with ExitStack() as stack:
        if debug_file is not None:
            try:
                debug_out: TextIO = stack.enter_context(debug_file.open("w", encoding="utf-8"))
            except OSError as e:
                raise ClikitIOError(f"Cannot open debug file {debug_file}: {e}") from e
            cfg = cfg.with_overrides(debug_out=debug_out)

        with Spinner(cfg) as spinner:
            for step in range(1, count + 1):
                time.sleep(step_delay)
                spinner.debug("finished step %d", step)
                spinner.inc_with_message("Step %d of %d", step, count)
    logger.info("Spinner finished %d steps", count)
