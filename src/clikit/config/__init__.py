# topmark:header:start
#
#   project      : CLIKit
#   file         : __init__.py
#   file_relpath : src/clikit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration helpers for CLIKit (logging setup and TOML settings).

Import submodules directly:

- [`clikit.config.logging`][clikit.config.logging]: project logger with TRACE support.
- [`clikit.config.loaders`][clikit.config.loaders]: discovery and loading of spinner settings.
"""

from __future__ import annotations
