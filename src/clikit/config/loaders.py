# topmark:header:start
#
#   project      : CLIKit
#   file         : loaders.py
#   file_relpath : src/clikit/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load spinner settings from TOML configuration files.

Settings live in a ``[spinner]`` table of ``clikit.toml`` or in
``[tool.clikit.spinner]`` of ``pyproject.toml``::

    [tool.clikit.spinner]
    interval = 0.05
    max-message-length = 60
    stop-message = "Done"

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Malformed files and invalid values raise [`clikit.errors.Error`][clikit.errors.model.Error]
with kind `Kind.INVALID`; unreadable files raise kind `Kind.INTERNAL`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from clikit import errors
from clikit.config.keys import Toml
from clikit.config.logging import get_logger
from clikit.constants import CLIKIT_TOML_NAME, PYPROJECT_TOML_NAME
from clikit.spinner.config import SpinnerConfig

if TYPE_CHECKING:
    from clikit.config.logging import ClikitLogger

logger: ClikitLogger = get_logger(__name__)

TomlTable = dict[str, Any]

# TOML key -> (SpinnerConfig field, accepted types)
_SPINNER_KEYS: dict[str, tuple[str, tuple[type, ...]]] = {
    Toml.KEY_INTERVAL: ("interval", (int, float)),
    Toml.KEY_MAX_MESSAGE_LENGTH: ("max_message_length", (int,)),
    Toml.KEY_START_MESSAGE: ("start_message", (str,)),
    Toml.KEY_STOP_MESSAGE: ("stop_message", (str,)),
}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``clikit.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        errors.Error: ``Kind.INTERNAL`` if the file cannot be read,
            ``Kind.INVALID`` if it is not valid TOML.
    """
    op = errors.Op("config.load_toml_dict")
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise errors.wrap(errors.Kind.INTERNAL, f"cannot read {path}", op, e) from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise errors.wrap(errors.Kind.INVALID, f"malformed TOML in {path}", op, e) from e
    data_any: Any = doc.unwrap()
    return data_any if isinstance(data_any, dict) else {}


def extract_spinner_table(data: TomlTable, *, is_pyproject: bool) -> TomlTable | None:
    """Return the spinner table of a parsed document, or None if it has none."""
    if is_pyproject:
        tool = data.get(Toml.SECTION_TOOL)
        if not isinstance(tool, dict):
            return None
        data = tool.get(Toml.SECTION_CLIKIT)
        if not isinstance(data, dict):
            return None
    table = data.get(Toml.SECTION_SPINNER)
    return table if isinstance(table, dict) else None


def find_config_file(start: Path | None = None) -> Path | None:
    """Find the nearest configuration file that carries CLIKit settings.

    Walks from ``start`` (default: the working directory) up to the filesystem
    root. In each directory ``clikit.toml`` is preferred; ``pyproject.toml`` only
    counts when it has a ``[tool.clikit]`` table.

    Args:
        start (Path | None): Directory to start from.

    Returns:
        Path | None: The configuration file, or None if none was found.
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CLIKIT_TOML_NAME
        if candidate.is_file():
            logger.debug("Found config file: %s", candidate)
            return candidate
        pyproject = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                data = load_toml_dict(pyproject)
            except errors.Error as e:
                logger.warning("Ignoring %s: %s", pyproject, e)
                continue
            tool = data.get(Toml.SECTION_TOOL)
            if isinstance(tool, dict) and Toml.SECTION_CLIKIT in tool:
                logger.debug("Found [tool.clikit] in: %s", pyproject)
                return pyproject
    return None


def load_spinner_settings(path: Path) -> dict[str, Any]:
    """Read spinner settings from ``path`` as `SpinnerConfig` field overrides.

    Args:
        path (Path): A ``clikit.toml`` or ``pyproject.toml`` file.

    Returns:
        dict[str, Any]: Mapping of `SpinnerConfig` field names to values. Empty when
        the file has no spinner table.

    Raises:
        errors.Error: If the file cannot be loaded or a value is invalid. Invalid
            values are collected and reported together in the error's cause.
    """
    op = errors.Op("config.load_spinner_settings")
    try:
        data = load_toml_dict(path)
    except errors.Error as e:
        raise errors.annotate("cannot load spinner settings", op, e) from e

    table = extract_spinner_table(data, is_pyproject=path.name == PYPROJECT_TOML_NAME)
    if table is None:
        logger.debug("No spinner settings in %s", path)
        return {}

    settings: dict[str, Any] = {}
    problems = errors.ErrorList()
    for key, value in table.items():
        entry = _SPINNER_KEYS.get(key)
        if entry is None:
            problems.append(errors.new(errors.Kind.INVALID, f"unknown key {key!r}", op))
            continue
        field, types = entry
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, types):
            problems.append(
                errors.new(errors.Kind.INVALID, f"{key!r} has unexpected type", op)
            )
            continue
        if field in ("interval", "max_message_length") and value <= 0:
            problems.append(errors.new(errors.Kind.INVALID, f"{key!r} must be positive", op))
            continue
        settings[field] = float(value) if field == "interval" else value

    if problems:
        raise errors.wrap(
            errors.Kind.INVALID, f"invalid spinner settings in {path}", op, problems
        )
    logger.debug("Spinner settings from %s: %s", path, settings)
    return settings


def resolve_spinner_config(
    path: Path | None = None,
    *,
    base: SpinnerConfig | None = None,
) -> SpinnerConfig:
    """Build a `SpinnerConfig` from ``base`` and the settings in a config file.

    Args:
        path (Path | None): Explicit configuration file; discovered with
            `find_config_file` when None.
        base (SpinnerConfig | None): Starting configuration; defaults to
            ``SpinnerConfig()``.

    Returns:
        SpinnerConfig: ``base`` with file settings applied.
    """
    cfg = base or SpinnerConfig()
    source = path or find_config_file()
    if source is None:
        return cfg
    return cfg.with_overrides(**load_spinner_settings(source))
