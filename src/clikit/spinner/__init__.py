# topmark:header:start
#
#   project      : CLIKit
#   file         : __init__.py
#   file_relpath : src/clikit/spinner/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal progress spinner.

See [`Spinner`][clikit.spinner.spinner.Spinner] and
[`SpinnerConfig`][clikit.spinner.config.SpinnerConfig].
"""

from __future__ import annotations

from clikit.spinner.config import SpinnerConfig
from clikit.spinner.spinner import FRAMES, TRUNCATION_MARKER, Spinner

__all__ = ["FRAMES", "TRUNCATION_MARKER", "Spinner", "SpinnerConfig"]
