# topmark:header:start
#
#   project      : CLIKit
#   file         : __init__.py
#   file_relpath : src/clikit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLIKit package.

CLIKit is a small toolkit of independent utilities for building command-line
tools: a terminal progress spinner, structured errors, ANSI string coloring
and ``${name}`` text expansion. A Click front end (``clikit``) exercises them.
"""

from __future__ import annotations
