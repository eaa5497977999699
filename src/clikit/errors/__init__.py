# topmark:header:start
#
#   project      : CLIKit
#   file         : __init__.py
#   file_relpath : src/clikit/errors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured errors with kinds, operation labels and wrapping.

Public surface:
    - [`Error`][clikit.errors.model.Error], [`ErrorList`][clikit.errors.model.ErrorList],
      [`ErrorString`][clikit.errors.model.ErrorString]
    - [`KindEnum`][clikit.errors.model.KindEnum], [`Kind`][clikit.errors.model.Kind],
      [`Op`][clikit.errors.model.Op]
    - constructors `new`, `wrap`, `annotate`
    - matching helpers `is_error`, `as_error`, `iter_chain`
"""

from __future__ import annotations

from clikit.errors.match import as_error, is_error, iter_chain
from clikit.errors.model import (
    Error,
    ErrorList,
    ErrorString,
    Kind,
    KindEnum,
    Op,
    annotate,
    new,
    wrap,
)

__all__ = [
    "Error",
    "ErrorList",
    "ErrorString",
    "Kind",
    "KindEnum",
    "Op",
    "annotate",
    "as_error",
    "is_error",
    "iter_chain",
    "new",
    "wrap",
]
