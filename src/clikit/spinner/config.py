# topmark:header:start
#
#   project      : CLIKit
#   file         : config.py
#   file_relpath : src/clikit/spinner/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration value for [`Spinner`][clikit.spinner.spinner.Spinner].

A `SpinnerConfig` is built once, before the spinner, and passed to its
constructor. It is immutable; use `dataclasses.replace` (or
[`SpinnerConfig.with_overrides`][clikit.spinner.config.SpinnerConfig.with_overrides])
to derive a variant.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from typing import TextIO

DEFAULT_INTERVAL: Final[float] = 0.1
DEFAULT_MAX_MESSAGE_LENGTH: Final[int] = 80


@dataclass(frozen=True)
class SpinnerConfig:
    """Immutable spinner settings with documented defaults.

    Attributes:
        interval (float): Seconds between animation frames. Defaults to 0.1.
        out (TextIO | None): Stream frames are written to. ``None`` means
            ``sys.stderr`` at construction time.
        debug_out (TextIO | None): Optional stream that receives every message the
            spinner has shown, one per line. Disabled when ``None``.
        start_message (str): Message applied when the spinner starts.
        stop_message (str): Message printed in place of the spinner when it stops.
        count (int): Total number of items tracked. Progress ``(n/count)`` is only
            shown when greater than 1.
        max_message_length (int): Messages longer than this are truncated.
    """

    interval: float = DEFAULT_INTERVAL
    out: TextIO | None = None
    debug_out: TextIO | None = None
    start_message: str = ""
    stop_message: str = ""
    count: int = 1
    max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH

    def with_overrides(self, **overrides: Any) -> SpinnerConfig:
        """Return a copy with the given fields replaced, ignoring ``None`` values.

        Unknown field names raise ``TypeError``.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown SpinnerConfig field(s): {', '.join(sorted(unknown))}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
