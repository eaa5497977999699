# topmark:header:start
#
#   project      : CLIKit
#   file         : match.py
#   file_relpath : src/clikit/errors/match.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Matching helpers for wrapped errors.

Both helpers walk the cause chain of an error: `Error.cause` for CLIKit errors
and ``__cause__`` for any other exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from clikit.errors.model import Error

if TYPE_CHECKING:
    from collections.abc import Iterator

_E = TypeVar("_E", bound=BaseException)


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield ``err`` followed by every error it wraps, outermost first."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.cause if isinstance(current, Error) else current.__cause__


def is_error(err: BaseException | None, target: BaseException) -> bool:
    """Report whether ``target`` appears anywhere in the chain of ``err``.

    A link matches when it is ``target`` or compares equal to it, which makes
    sentinel [`ErrorString`][clikit.errors.model.ErrorString] values work after
    wrapping.

    Args:
        err (BaseException | None): The error to inspect.
        target (BaseException): The error to look for.

    Returns:
        bool: True if a link in the chain matches ``target``.
    """
    return any(link is target or link == target for link in iter_chain(err))


def as_error(err: BaseException | None, cls: type[_E]) -> _E | None:
    """Return the first error in the chain of ``err`` that is an instance of ``cls``.

    Args:
        err (BaseException | None): The error to inspect.
        cls (type[_E]): The exception type to look for.

    Returns:
        _E | None: The matching error, or None if the chain has none.
    """
    for link in iter_chain(err):
        if isinstance(link, cls):
            return link
    return None
