# topmark:header:start
#
#   project      : CLIKit
#   file         : __main__.py
#   file_relpath : src/clikit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CLIKit via ``python -m clikit``.

It delegates directly to :func:`clikit.cli.main.cli`, so the module interface
and the ``clikit`` console script behave identically.

Examples:
    Show a spinner over five simulated steps::

        python -m clikit spin --count 5
"""

from __future__ import annotations

from clikit.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
