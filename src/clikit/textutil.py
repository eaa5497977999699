# topmark:header:start
#
#   project      : CLIKit
#   file         : textutil.py
#   file_relpath : src/clikit/textutil.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text helpers: ``${name}`` variable expansion for ``str`` and ``bytes``.

Placeholders have the form ``${name}``; ``name`` is any text up to the next
closing brace and is passed verbatim to a caller-supplied mapping function.
Malformed placeholders are copied through unchanged:

- ``${`` with no closing brace,
- ``${}`` with an empty name.

When nothing is expanded, the input object itself is returned (no copy).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_OPEN = "${"
_CLOSE = "}"
_OPEN_BYTES = b"${"
_CLOSE_BYTES = b"}"


def expand_variables_string(src: str, mapping: Callable[[str], str]) -> str:
    """Replace ``${name}`` placeholders in ``src`` using ``mapping``.

    Args:
        src (str): Text to expand.
        mapping (Callable[[str], str]): Returns the replacement for a variable name.

    Returns:
        str: The expanded text, or ``src`` itself when it has no placeholders.

    Example:
        >>> expand_variables_string("home: ${HOME}", {"HOME": "/home/foo"}.__getitem__)
        'home: /home/foo'
    """
    parts: list[str] | None = None
    end = 0
    start = src.find(_OPEN)
    while start != -1:
        name_start = start + len(_OPEN)
        close = src.find(_CLOSE, name_start)
        if close == -1:
            # Unterminated `${`, nothing further can be a variable
            break
        if close == name_start:
            # Empty `${}`, leave as is
            start = src.find(_OPEN, name_start)
            continue
        if parts is None:
            parts = []
        parts.append(src[end:start])
        parts.append(mapping(src[name_start:close]))
        end = close + 1
        start = src.find(_OPEN, end)

    if parts is None:
        return src
    parts.append(src[end:])
    return "".join(parts)


def expand_variables(src: bytes, mapping: Callable[[str], str]) -> bytes:
    """Replace ``${name}`` placeholders in ``src`` using ``mapping``.

    Names are decoded and values encoded as UTF-8; bytes outside placeholders
    are copied untouched, so ``src`` need not be valid UTF-8.

    Args:
        src (bytes): Data to expand.
        mapping (Callable[[str], str]): Returns the replacement for a variable name.

    Returns:
        bytes: The expanded data, or ``src`` itself when it has no placeholders.
    """
    buf: bytearray | None = None
    end = 0
    start = src.find(_OPEN_BYTES)
    while start != -1:
        name_start = start + len(_OPEN_BYTES)
        close = src.find(_CLOSE_BYTES, name_start)
        if close == -1:
            break
        if close == name_start:
            start = src.find(_OPEN_BYTES, name_start)
            continue
        if buf is None:
            buf = bytearray()
        buf += src[end:start]
        name = src[name_start:close].decode("utf-8", errors="surrogateescape")
        buf += mapping(name).encode("utf-8", errors="surrogateescape")
        end = close + 1
        start = src.find(_OPEN_BYTES, end)

    if buf is None:
        return src
    buf += src[end:]
    return bytes(buf)
