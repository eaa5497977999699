# topmark:header:start
#
#   project      : CLIKit
#   file         : constants.py
#   file_relpath : src/clikit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLIKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CLIKIT_VERSION: str = get_version("clikit")

# Environment variables
LOG_LEVEL_ENV_VAR: str = "CLIKIT_LOG_LEVEL"
NO_COLOR_ENV_VAR: str = "NO_COLOR"
FORCE_COLOR_ENV_VAR: str = "FORCE_COLOR"

# Configuration files, in discovery order within a directory
CLIKIT_TOML_NAME: str = "clikit.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
