# topmark:header:start
#
#   project      : CLIKit
#   file         : spinner.py
#   file_relpath : src/clikit/spinner/spinner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Animated terminal spinner with progress tracking.

The spinner renders a rotating glyph, an optional message and an optional
``(completed/total)`` counter on a background thread, rewriting a single
terminal line on every frame.

Concurrency:
    All mutable state (message, counters, last rendered line, pending debug
    messages, active flag) is guarded by one lock. Foreground calls and the
    animation thread only touch it while holding that lock, and the animation
    thread sleeps without holding it. Each `start()` creates a fresh
    single-slot queue that `stop()` uses to signal the thread; because `stop()`
    clears the active flag and erases the line under the lock, no frame is
    rendered after `stop()` returns. A thread only draws while its own queue is
    still the current one, so a restart never leaves two threads drawing.

Misuse (starting twice, stopping an idle spinner, incrementing past the
total, format arguments that do not fit the message) is silently tolerated: a
progress indicator never fails the caller.

Example:
    ```python
    cfg = SpinnerConfig(count=len(files), stop_message="Processed all files")
    with Spinner(cfg) as s:
        for path in files:
            process(path)
            s.inc_with_message("Processed %s", path)
    ```
"""

from __future__ import annotations

import queue
import sys
import threading
from typing import TYPE_CHECKING, Final

from clikit.config.logging import get_logger
from clikit.spinner.config import SpinnerConfig

if TYPE_CHECKING:
    from types import TracebackType
    from typing import TextIO

    from clikit.config.logging import ClikitLogger

logger: ClikitLogger = get_logger(__name__)

FRAMES: Final[tuple[str, ...]] = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

TRUNCATION_MARKER: Final[str] = "..."

# Terminals without erase sequences (classic Windows console)
_PAD_ERASE: bool = sys.platform == "win32"

# Sequences repeated once per rendered character; ESC[K covers macOS Terminal
_ERASE_SEQUENCES: Final[tuple[str, ...]] = ("\b", "\x7f", "\b", "\x1b[K")
_ERASE_LINE: Final[str] = "\r\x1b[K"


def _compose(message: str, args: tuple[object, ...]) -> str:
    """Return ``message % args``, or a plain rendering if they do not match."""
    if not args:
        return message
    try:
        return message % args
    except (TypeError, ValueError) as e:
        logger.debug("Cannot format spinner message %r with %r: %s", message, args, e)
        return f"{message} {args!r}"


class Spinner:
    """Terminal spinner driven by a background thread.

    Args:
        config (SpinnerConfig | None): Settings; defaults to ``SpinnerConfig()``.
    """

    def __init__(self, config: SpinnerConfig | None = None) -> None:
        cfg = config or SpinnerConfig()
        self._interval: float = cfg.interval
        self._out: TextIO = cfg.out or sys.stderr
        self._debug_out: TextIO | None = cfg.debug_out
        self._start_msg: str = cfg.start_message
        self._stop_msg: str = cfg.stop_message
        self._count: int = cfg.count
        self._max_msg_len: int = cfg.max_message_length

        self._lock = threading.Lock()
        self._stop_queue: queue.Queue[None] | None = None
        self._thread: threading.Thread | None = None
        self._active: bool = False
        self._msg: str = ""
        self._pending_debug: list[str] = []
        self._last_output: str = ""
        self._completed: int = 0

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    @property
    def active(self) -> bool:
        """Whether the spinner is running."""
        with self._lock:
            return self._active

    @property
    def completed(self) -> int:
        """Number of items completed so far."""
        with self._lock:
            return self._completed

    @property
    def count(self) -> int:
        """Total number of items tracked."""
        return self._count

    @property
    def message(self) -> str:
        """The message shown next to the glyph (with its leading space)."""
        with self._lock:
            return self._msg

    def start(self) -> None:
        """Start the spinner. Does nothing if it is already running."""
        with self._lock:
            if self._active:
                return
            self._active = True
            self._set_msg(self._start_msg)
            stop_queue: queue.Queue[None] = queue.Queue(maxsize=1)
            self._stop_queue = stop_queue
            self._thread = threading.Thread(
                target=self._run,
                args=(stop_queue,),
                name="clikit-spinner",
                daemon=True,
            )
            self._thread.start()
            count, interval = self._count, self._interval
        logger.trace("spinner started (count=%d, interval=%.3fs)", count, interval)

    def stop(self) -> None:
        """Stop the spinner and erase it. Does nothing if it is not running.

        The stop message, if configured, replaces the spinner and always ends
        with a newline.
        """
        with self._lock:
            if not self._active:
                return
            self._active = False
            if self._stop_queue is not None:
                self._stop_queue.put_nowait(None)
                self._stop_queue = None

            # The current message was never flushed since no frame follows
            self._push_debug(self._msg)
            self._msg = ""
            self._erase()

            if self._stop_msg:
                stop_msg = self._stop_msg
                if not stop_msg.endswith("\n"):
                    stop_msg += "\n"
                self._out.write(stop_msg)
                self._out.flush()
            completed = self._completed
        logger.trace("spinner stopped (%d/%d completed)", completed, self._count)

    def inc(self) -> None:
        """Increment progress by one. Does nothing once progress is complete."""
        self.inc_with_message("")

    def inc_with_message(self, message: str, *args: object) -> None:
        """Increment progress by one and show ``message``.

        When ``args`` are given the message is composed as ``message % args``,
        like the ``logging`` module does; a template that does not match its
        arguments is shown as the template followed by the arguments. Does
        nothing once progress is complete.

        Args:
            message (str): New message; empty keeps the current one.
            *args (object): Optional formatting arguments for ``message``.
        """
        with self._lock:
            if self._completed >= self._count:
                return
            self._completed += 1
            self._set_msg(_compose(message, args))

    def debug(self, message: str, *args: object) -> None:
        """Record ``message`` for the debug stream without showing it.

        Does nothing when no debug stream is configured. Pending debug messages
        are written on the next frame or when the spinner stops.

        Args:
            message (str): Debug line; composed as ``message % args`` when
                ``args`` are given.
            *args (object): Optional formatting arguments for ``message``.
        """
        if self._debug_out is None:
            return
        message = _compose(message, args)
        with self._lock:
            self._pending_debug.append(message)

    # --- internals; callers below must hold self._lock ---

    def _set_msg(self, message: str) -> None:
        if message.endswith("\r\n"):
            message = message[:-2]
        elif message.endswith("\n"):
            message = message[:-1]
        if not message:
            return
        if len(message) > self._max_msg_len:
            message = message[: self._max_msg_len] + TRUNCATION_MARKER
        # Pad between the glyph and the message
        if not message.startswith(" "):
            message = " " + message
        self._push_debug(self._msg)
        self._msg = message

    def _push_debug(self, message: str) -> None:
        if self._debug_out is None or not message:
            return
        self._pending_debug.append(message[1:] if message.startswith(" ") else message)

    def _erase(self) -> None:
        n = len(self._last_output)
        if _PAD_ERASE:
            self._out.write("\r" + " " * n + "\r")
        else:
            for seq in _ERASE_SEQUENCES:
                self._out.write(seq * n)
            self._out.write(_ERASE_LINE)
        self._out.flush()
        self._last_output = ""

        if self._debug_out is not None and self._pending_debug:
            for line in self._pending_debug:
                self._debug_out.write(line + "\n")
            self._debug_out.flush()
            self._pending_debug.clear()

    def _render_frame(self, glyph: str, stop_queue: queue.Queue[None]) -> bool:
        """Draw one frame; return False if the cycle owning ``stop_queue`` has ended."""
        with self._lock:
            # After a restart the current cycle belongs to a newer thread
            if not self._active or self._stop_queue is not stop_queue:
                return False
            self._erase()
            line = f"\r{glyph}{self._msg} "
            if self._count > 1:
                line += f"({self._completed}/{self._count}) "
            self._out.write(line)
            self._out.flush()
            self._last_output = line
            return True

    def _run(self, stop_queue: queue.Queue[None]) -> None:
        """Animation loop; runs until a value arrives on ``stop_queue``."""
        while True:
            for glyph in FRAMES:
                try:
                    stop_queue.get_nowait()
                except queue.Empty:
                    pass
                else:
                    return
                if not self._render_frame(glyph, stop_queue):
                    return
                # Sleep without the lock; wake early on the stop signal
                try:
                    stop_queue.get(timeout=self._interval)
                except queue.Empty:
                    continue
                return
