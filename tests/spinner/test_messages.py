# topmark:header:start
#
#   project      : CLIKit
#   file         : test_messages.py
#   file_relpath : tests/spinner/test_messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Spinner: progress counting, message normalization and debug history.

These tests do not start the animation thread; they exercise the state
changes that `inc*` and `debug` make under the spinner's lock.
"""

from __future__ import annotations

import io

import pytest

from clikit.spinner import TRUNCATION_MARKER, Spinner, SpinnerConfig


def make_spinner(**kwargs: object) -> tuple[Spinner, io.StringIO]:
    """Return a spinner writing to a fresh buffer."""
    out = io.StringIO()
    return Spinner(SpinnerConfig(out=out, **kwargs)), out  # type: ignore[arg-type]


def test_defaults() -> None:
    """A new spinner is inactive with no progress."""
    spinner = Spinner()
    assert not spinner.active
    assert spinner.completed == 0
    assert spinner.count == 1
    assert spinner.message == ""


def test_inc_stops_at_count() -> None:
    """Incrementing past the total leaves progress unchanged."""
    spinner, _ = make_spinner(count=3)
    for _ in range(3):
        spinner.inc()
    assert spinner.completed == 3

    spinner.inc()
    assert spinner.completed == 3


def test_inc_with_message_after_completion_keeps_message() -> None:
    """A no-op increment does not touch the message either."""
    spinner, _ = make_spinner(count=1)
    spinner.inc_with_message("first")
    spinner.inc_with_message("second")
    assert spinner.completed == 1
    assert spinner.message == " first"


def test_inc_without_message_keeps_message() -> None:
    """An empty message leaves the current one in place."""
    spinner, _ = make_spinner(count=3)
    spinner.inc_with_message("working")
    spinner.inc()
    assert spinner.message == " working"
    assert spinner.completed == 2


def test_inc_with_message_formats_arguments() -> None:
    """Arguments are composed into the message like the logging module does."""
    spinner, _ = make_spinner(count=5)
    spinner.inc_with_message("Step %d of %d", 1, 5)
    assert spinner.message == " Step 1 of 5"


def test_message_gets_single_leading_space() -> None:
    """A leading space is added once and never doubled."""
    spinner, _ = make_spinner(count=3)
    spinner.inc_with_message("hi")
    assert spinner.message == " hi"
    spinner.inc_with_message(" there")
    assert spinner.message == " there"


@pytest.mark.parametrize("terminator", ["\n", "\r\n"])
def test_trailing_line_terminator_is_stripped(terminator: str) -> None:
    """A single trailing line terminator is removed."""
    spinner, _ = make_spinner(count=2)
    spinner.inc_with_message(f"line{terminator}")
    assert spinner.message == " line"


def test_long_message_is_truncated() -> None:
    """Messages over the limit keep exactly the limit plus the marker."""
    spinner, _ = make_spinner(count=2, max_message_length=5)
    spinner.inc_with_message("abcdefgh")
    assert spinner.message == " abcde" + TRUNCATION_MARKER


def test_message_at_limit_is_untouched() -> None:
    """A message of exactly the limit is not truncated."""
    spinner, _ = make_spinner(count=2, max_message_length=5)
    spinner.inc_with_message("abcde")
    assert spinner.message == " abcde"


def test_default_limit_is_80() -> None:
    """The default truncation threshold is 80 characters."""
    spinner, _ = make_spinner(count=2)
    spinner.inc_with_message("x" * 100)
    assert spinner.message == " " + "x" * 80 + TRUNCATION_MARKER


def test_debug_without_debug_stream_is_noop() -> None:
    """`debug` records nothing when no debug stream is configured."""
    spinner, out = make_spinner()
    spinner.debug("hidden %s", "line")
    assert spinner._pending_debug == []  # pylint: disable=protected-access
    assert out.getvalue() == ""


def test_history_not_retained_without_debug_stream() -> None:
    """Shown messages are only kept when they can be flushed somewhere."""
    spinner, _ = make_spinner(count=3)
    spinner.inc_with_message("one")
    spinner.inc_with_message("two")
    assert spinner._pending_debug == []  # pylint: disable=protected-access


def test_previous_messages_are_queued_for_debug() -> None:
    """Replacing a message queues the previous one without its leading space."""
    debug_out = io.StringIO()
    spinner, _ = make_spinner(count=3, debug_out=debug_out)
    spinner.inc_with_message("one")
    spinner.debug("aux %d", 1)
    spinner.inc_with_message("two")
    # pylint: disable=protected-access
    assert spinner._pending_debug == ["aux 1", "one"]
    assert debug_out.getvalue() == ""


def test_newline_only_message_keeps_current_message() -> None:
    """A message that is only a line terminator counts as empty."""
    debug_out = io.StringIO()
    spinner, _ = make_spinner(count=4, debug_out=debug_out)
    spinner.inc_with_message("one")
    spinner.inc_with_message("\n")
    assert spinner.message == " one"

    spinner.inc_with_message("two")
    # pylint: disable-next=protected-access
    assert spinner._pending_debug == ["one"]


def test_mismatched_format_arguments_do_not_raise() -> None:
    """A template that does not match its arguments is shown with them appended."""
    spinner, _ = make_spinner(count=2)
    spinner.inc_with_message("%d files", "x")
    assert spinner.completed == 1
    assert spinner.message == " %d files ('x',)"


def test_mismatched_format_on_completed_spinner_is_noop() -> None:
    """Once progress is complete the message is not even composed."""
    spinner, _ = make_spinner(count=1)
    spinner.inc()
    spinner.inc_with_message("%d files", "x")
    assert spinner.completed == 1
    assert spinner.message == ""


def test_debug_with_mismatched_format_arguments() -> None:
    """Debug lines fall back to the template followed by the arguments."""
    spinner, _ = make_spinner(debug_out=io.StringIO())
    spinner.debug("100% done %s", "x")
    spinner.debug("%s of %s", "a")
    # pylint: disable-next=protected-access
    assert spinner._pending_debug == ["100% done %s ('x',)", "%s of %s ('a',)"]
