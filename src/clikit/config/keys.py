# topmark:header:start
#
#   project      : CLIKit
#   file         : keys.py
#   file_relpath : src/clikit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for CLIKit configuration.

These constants are the external configuration schema as it appears in
``clikit.toml`` and in ``[tool.clikit]`` inside ``pyproject.toml``. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by CLIKit configuration."""

    # pyproject.toml nesting: [tool.clikit]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_CLIKIT: Final[str] = "clikit"

    # [spinner]
    SECTION_SPINNER: Final[str] = "spinner"

    KEY_INTERVAL: Final[str] = "interval"
    KEY_MAX_MESSAGE_LENGTH: Final[str] = "max-message-length"
    KEY_START_MESSAGE: Final[str] = "start-message"
    KEY_STOP_MESSAGE: Final[str] = "stop-message"
