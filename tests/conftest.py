# topmark:header:start
#
#   project      : CLIKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CLIKit test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator

import pytest

from clikit import color
from clikit.config import logging


@pytest.fixture(autouse=True)
def silence_clikit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure CLIKit's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("CLIKIT_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def restore_color_state() -> Iterator[None]:
    """Restore the process-wide color switch after each test.

    The CLI and the color tests flip it; other tests must not observe that.
    """
    # pylint: disable=protected-access
    saved = (color._no_color, color._enabled)
    yield
    color._no_color, color._enabled = saved


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def wait_for(predicate: Callable[[], bool], timeout: float = 2.0) -> bool:
    """Poll ``predicate`` until it returns True or ``timeout`` seconds elapse.

    Returns:
        bool: The last value returned by ``predicate``.
    """
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()
