# topmark:header:start
#
#   project      : CLIKit
#   file         : __init__.py
#   file_relpath : src/clikit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for CLIKit."""

from __future__ import annotations
