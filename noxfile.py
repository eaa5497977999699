# topmark:header:start
#
#   project      : CLIKit
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLIKit project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest.
  - `lint`: Ruff static analysis.
  - `format_check`: Verify formatting with ruff.
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import tomllib
import warnings
from typing import Any, cast

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` using stdlib TOML parsing.

    This runs at **noxfile import time**, so it must not depend on project
    runtime dependencies.

    Returns:
        dict[str, Any]: Parsed TOML document (top-level table).
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return {}


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.11", "3.12", ...], sorted.
    """
    project_any = _parse_pyproject_toml().get("project")
    classifiers_any = project_any.get("classifiers") if isinstance(project_any, dict) else None
    if not isinstance(classifiers_any, list):
        warnings.warn(
            "Could not find 'classifiers' in pyproject.toml. "
            f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    prefix = "Programming Language :: Python :: "
    versions: set[tuple[int, int]] = set()
    for c in cast("list[str]", classifiers_any):
        if not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        # Accept only X.Y numeric versions.
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add((int(parts[0]), int(parts[1])))

    if not versions:
        return [CURRENT_PYTHON_VERSION]
    return [f"{major}.{minor}" for major, minor in sorted(versions)]


# Resolve versions once at startup
PYTHONS: list[str] = get_supported_pythons()

# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))
    session.install("-e", ".[test]")
    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting without modifying files."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    session.install("build", "twine")
    session.run(
        "python",
        "-c",
        "import shutil; shutil.rmtree('dist', ignore_errors=True)",
    )
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
