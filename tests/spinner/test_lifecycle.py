# topmark:header:start
#
#   project      : CLIKit
#   file         : test_lifecycle.py
#   file_relpath : tests/spinner/test_lifecycle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Spinner: start/stop lifecycle, frame rendering and erasing.

A long frame interval keeps the animation thread asleep after its first
frame, so the exact bytes written to the output buffer are deterministic.
"""

from __future__ import annotations

import io

import pytest

from clikit.spinner import FRAMES, Spinner, SpinnerConfig
from clikit.spinner import spinner as spinner_module
from tests.conftest import wait_for

SLOW = 30.0


@pytest.fixture(autouse=True)
def ansi_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use the ANSI erase strategy regardless of the host platform."""
    monkeypatch.setattr(spinner_module, "_PAD_ERASE", False)


def ansi_erase(line: str) -> str:
    """Return what erasing ``line`` writes on an ANSI terminal."""
    n = len(line)
    return "\b" * n + "\x7f" * n + "\b" * n + "\x1b[K" * n + "\r\x1b[K"


def join_thread(spinner: Spinner) -> None:
    """Wait for the animation thread to finish."""
    thread = spinner._thread  # pylint: disable=protected-access
    assert thread is not None
    thread.join(timeout=2)
    assert not thread.is_alive()


def test_first_frame_layout() -> None:
    """A frame is ``\\r<glyph><message> (<done>/<total>) `` after an erase."""
    out = io.StringIO()
    spinner = Spinner(
        SpinnerConfig(out=out, interval=SLOW, start_message="working", count=3)
    )
    spinner.start()
    try:
        assert wait_for(lambda: out.getvalue() != "")
        assert out.getvalue() == "\r\x1b[K" + f"\r{FRAMES[0]} working (0/3) "
    finally:
        spinner.stop()


def test_progress_hidden_for_single_item() -> None:
    """With a count of 1 the frame has no progress suffix."""
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=SLOW, start_message="busy"))
    spinner.start()
    try:
        assert wait_for(lambda: out.getvalue() != "")
        assert out.getvalue().endswith(f"\r{FRAMES[0]} busy ")
    finally:
        spinner.stop()


def test_stop_erases_frame_then_prints_stop_message() -> None:
    """Stopping erases the last frame and prints the stop message with a newline."""
    out = io.StringIO()
    spinner = Spinner(
        SpinnerConfig(out=out, interval=SLOW, start_message="working", stop_message="done")
    )
    spinner.start()
    assert wait_for(lambda: out.getvalue() != "")
    frame = f"\r{FRAMES[0]} working "

    spinner.stop()
    join_thread(spinner)

    assert out.getvalue() == "\r\x1b[K" + frame + ansi_erase(frame) + "done\n"
    assert not spinner.active


def test_stop_message_newline_not_doubled() -> None:
    """A stop message that already ends with a newline is written as is."""
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=SLOW, stop_message="done\n"))
    spinner.start()
    spinner.stop()
    assert out.getvalue().endswith("done\n")
    assert not out.getvalue().endswith("done\n\n")


def test_padding_erase_strategy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Terminals without erase sequences get the line overwritten with spaces."""
    monkeypatch.setattr(spinner_module, "_PAD_ERASE", True)
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=SLOW, start_message="x"))
    spinner.start()
    assert wait_for(lambda: out.getvalue() != "")
    frame = f"\r{FRAMES[0]} x "

    spinner.stop()
    assert out.getvalue() == "\r\r" + frame + "\r" + " " * len(frame) + "\r"


def test_start_is_idempotent() -> None:
    """Starting a running spinner keeps the same animation thread."""
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=SLOW))
    spinner.start()
    first_thread = spinner._thread  # pylint: disable=protected-access
    spinner.start()
    spinner.start()
    try:
        assert spinner._thread is first_thread  # pylint: disable=protected-access
        assert spinner.active
    finally:
        spinner.stop()


def test_stop_when_inactive_writes_nothing() -> None:
    """Stopping an idle spinner produces no output."""
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, stop_message="done"))
    spinner.stop()
    spinner.stop()
    assert out.getvalue() == ""


def test_second_stop_writes_nothing() -> None:
    """Only the first stop after a start writes anything."""
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=SLOW, stop_message="done"))
    spinner.start()
    spinner.stop()
    written = out.getvalue()
    spinner.stop()
    assert out.getvalue() == written


def test_no_frames_after_stop() -> None:
    """Once stop returns the output never changes again."""
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=0.001, stop_message="done"))
    spinner.start()
    assert wait_for(lambda: out.getvalue().count("\r") > 10)
    spinner.stop()
    join_thread(spinner)
    assert out.getvalue().endswith("done\n")


def test_restart_runs_a_new_animation_thread() -> None:
    """A stopped spinner can be started again and animates."""
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=0.001, start_message="again"))
    spinner.start()
    spinner.stop()
    first_thread = spinner._thread  # pylint: disable=protected-access

    out.seek(0)
    out.truncate()
    spinner.start()
    try:
        second_thread = spinner._thread  # pylint: disable=protected-access
        assert second_thread is not first_thread
        assert wait_for(lambda: out.getvalue().count(" again ") >= 3)
        assert second_thread is not None and second_thread.is_alive()
    finally:
        spinner.stop()


def test_debug_stream_receives_message_history() -> None:
    """Every shown message reaches the debug stream in order, without padding."""
    out = io.StringIO()
    debug_out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, debug_out=debug_out, interval=SLOW, count=3))
    spinner.start()
    spinner.inc_with_message("step1")
    spinner.inc_with_message("step2")
    spinner.stop()

    assert debug_out.getvalue() == "step1\nstep2\n"


def test_debug_lines_are_flushed_on_stop() -> None:
    """Auxiliary debug lines go to the debug stream but never to the output."""
    out = io.StringIO()
    debug_out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, debug_out=debug_out, interval=SLOW))
    spinner.start()
    spinner.debug("connecting to %s", "db")
    spinner.stop()

    assert debug_out.getvalue() == "connecting to db\n"
    assert "connecting" not in out.getvalue()


def test_context_manager_stops_on_error() -> None:
    """Leaving the ``with`` block stops the spinner even when it raises."""
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=SLOW, stop_message="bye"))
    with pytest.raises(RuntimeError), spinner as running:
        assert running is spinner
        assert spinner.active
        raise RuntimeError("boom")

    assert not spinner.active
    assert out.getvalue().endswith("bye\n")


def test_thread_from_previous_cycle_draws_nothing_after_restart() -> None:
    """A frame attempted by the previous cycle's thread after stop/start is dropped.

    The old thread may already be waiting for the lock when the spinner is
    stopped and started again; once it gets the lock it must bow out instead of
    drawing next to the new thread.
    """
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=SLOW, start_message="cycle"))
    spinner.start()
    old_queue = spinner._stop_queue  # pylint: disable=protected-access
    assert old_queue is not None
    assert wait_for(lambda: out.getvalue() != "")

    spinner.stop()
    spinner.start()
    try:
        assert wait_for(lambda: out.getvalue().count(" cycle ") == 2)
        written = out.getvalue()

        # pylint: disable-next=protected-access
        assert spinner._render_frame(FRAMES[1], old_queue) is False
        assert out.getvalue() == written
        assert spinner.active
    finally:
        spinner.stop()


def test_only_one_animation_thread_after_restart() -> None:
    """Stopping and restarting leaves exactly one live animation thread."""
    out = io.StringIO()
    spinner = Spinner(SpinnerConfig(out=out, interval=0.001))
    spinner.start()
    first_thread = spinner._thread  # pylint: disable=protected-access
    spinner.stop()
    spinner.start()
    try:
        assert first_thread is not None
        first_thread.join(timeout=2)
        assert not first_thread.is_alive()
        second_thread = spinner._thread  # pylint: disable=protected-access
        assert second_thread is not None and second_thread.is_alive()
    finally:
        spinner.stop()
