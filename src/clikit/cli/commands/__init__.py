# topmark:header:start
#
#   project      : CLIKit
#   file         : __init__.py
#   file_relpath : src/clikit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLIKit subcommands."""

from __future__ import annotations
