# topmark:header:start
#
#   project      : CLIKit
#   file         : model.py
#   file_relpath : src/clikit/errors/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured error types for CLIKit.

An [`Error`][clikit.errors.model.Error] carries four independent pieces of
information:

- ``kind``: a member of a [`KindEnum`][clikit.errors.model.KindEnum] subclass that
  classifies the failure independently of its message text;
- ``op``: an [`Op`][clikit.errors.model.Op] label naming the call site
  (e.g. ``"config.Read"``);
- ``message``: a short human description;
- ``cause``: the wrapped error, if any.

Rendering:
    ``str(err)`` yields the shallow form ``"<kind>: <message>: <cause>"``. When the
    cause is an `Error` of the same kind, the inner kind is not repeated.

    ``err.detailed()`` prefixes the operation label and puts a wrapped `Error`
    on its own indented continuation line::

        test.Bar: invalid operation: cannot find file:
            test.Foo: internal error: no file for path: file not exist

Example:
    ```python
    from clikit import errors

    try:
        text = path.read_text()
    except OSError as exc:
        raise errors.wrap(errors.Kind.INTERNAL, "unable to read file", errors.Op("config.Read"), exc)
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, NewType

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

Op = NewType("Op", str)
"""Label identifying the operation that produced or wrapped an error."""


class KindEnum(str, Enum):
    """Base class for error classifications.

    Subclass it to declare a closed set of kinds; each member's value is the
    human-readable description used when rendering errors.
    """

    @property
    def description(self) -> str:
        """Return the human-readable description of this kind."""
        return self.value


class Kind(KindEnum):
    """Built-in error kinds shared by CLIKit modules."""

    INVALID = "invalid operation"
    INTERNAL = "internal error"


class Error(Exception):
    """Error carrying a kind, an operation label, a message and an optional cause.

    Args:
        message (str): Human-readable description of the failure.
        kind (KindEnum | None): Classification of the failure.
        op (Op | str): Operation label; empty when unknown.
        cause (BaseException | None): Wrapped error. Also linked as ``__cause__``
            so tracebacks show the chain.

    Attributes:
        kind (KindEnum | None): Classification of the failure.
        op (str): Operation label.
        message (str): Human-readable description.
        cause (BaseException | None): Wrapped error.
    """

    kind: KindEnum | None
    op: str
    message: str
    cause: BaseException | None

    def __init__(
        self,
        message: str = "",
        *,
        kind: KindEnum | None = None,
        op: Op | str = "",
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.op = op
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self._render(detailed=False, outer_kind=None)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, kind={self.kind!r}, "
            f"op={self.op!r}, cause={self.cause!r})"
        )

    def detailed(self) -> str:
        """Return the detailed rendering including operation labels.

        Returns:
            str: The error chain with one line per wrapped `Error`.
        """
        return self._render(detailed=True, outer_kind=None)

    def _render(self, *, detailed: bool, outer_kind: KindEnum | None) -> str:
        parts: list[str] = []
        if detailed and self.op:
            parts.append(self.op)
        # The enclosing error already printed this kind.
        if self.kind is not None and self.kind != outer_kind:
            parts.append(self.kind.description)
        if self.message:
            parts.append(self.message)
        head = ": ".join(parts)

        if self.cause is None:
            return head

        if isinstance(self.cause, Error):
            inner_kind = self.kind if self.kind is not None else outer_kind
            inner = self.cause._render(detailed=detailed, outer_kind=inner_kind)
            if detailed:
                inner = inner.replace("\n", "\n\t")
                return f"{head}:\n\t{inner}" if head else inner
        elif detailed and isinstance(self.cause, ErrorList):
            inner = self.cause.detailed()
        else:
            inner = str(self.cause)

        if not head:
            return inner
        if not inner:
            return head
        return f"{head}: {inner}"


class ErrorString(Exception):
    """Sentinel error identified by its text.

    Two instances compare equal when they have the same type and text, so a
    module can export a constant and callers can test for it with
    [`is_error`][clikit.errors.match.is_error] after any amount of wrapping.

    Example:
        ```python
        EOF = ErrorString("EOF")
        err = wrap(Kind.INTERNAL, "unexpected end of file", Op("config.Read"), EOF)
        assert is_error(err, EOF)
        ```
    """

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.text == other.text  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.text))


class ErrorList(Exception):
    """Aggregate of several errors reported together.

    ``str()`` renders one error per line. ``detailed()`` uses the detailed form
    for every contained `Error` so operation labels are shown.
    """

    def __init__(self, errors: Iterable[BaseException] = ()) -> None:
        self.errors: list[BaseException] = list(errors)
        super().__init__(self.errors)

    def __str__(self) -> str:
        return "\n".join(str(err) for err in self.errors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.errors!r})"

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def __getitem__(self, index: int) -> BaseException:
        return self.errors[index]

    def __bool__(self) -> bool:
        return bool(self.errors)

    def append(self, err: BaseException) -> None:
        """Add ``err`` to the end of the list."""
        self.errors.append(err)

    def detailed(self) -> str:
        """Return every error on its own line, detailed where supported."""
        lines: list[str] = []
        for err in self.errors:
            if isinstance(err, (Error, ErrorList)):
                lines.append(err.detailed())
            else:
                lines.append(str(err))
        return "\n".join(lines)


def new(kind: KindEnum | None, message: str, op: Op | str = "") -> Error:
    """Create an `Error` without a cause.

    Args:
        kind (KindEnum | None): Classification of the failure.
        message (str): Human-readable description.
        op (Op | str): Operation label.

    Returns:
        Error: The new error.
    """
    return Error(message, kind=kind, op=op)


def wrap(kind: KindEnum | None, message: str, op: Op | str, cause: BaseException) -> Error:
    """Create an `Error` of ``kind`` that wraps ``cause``.

    Args:
        kind (KindEnum | None): Classification of the failure; overrides the kind of
            a wrapped `Error`.
        message (str): Human-readable description.
        op (Op | str): Operation label.
        cause (BaseException): The error being wrapped.

    Returns:
        Error: The new error.
    """
    return Error(message, kind=kind, op=op, cause=cause)


def annotate(message: str, op: Op | str, cause: BaseException) -> Error:
    """Wrap ``cause`` with a message and operation, keeping its kind.

    If ``cause`` is an `Error`, its kind is copied onto the new outer error;
    ``cause`` itself is left untouched.

    Args:
        message (str): Human-readable description.
        op (Op | str): Operation label.
        cause (BaseException): The error being wrapped.

    Returns:
        Error: The new error.
    """
    kind = cause.kind if isinstance(cause, Error) else None
    return Error(message, kind=kind, op=op, cause=cause)
