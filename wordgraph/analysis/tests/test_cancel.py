import io
import os
import signal
import threading

import pytest

from wordgraph.analysis.cancel import (
    CancellationToken,
    cancel_on_enter,
    cancel_on_interrupt,
    is_cancelled,
)


def test_token_lifecycle():
    """Test cancel and reset on a token."""
    token = CancellationToken()
    assert not token.cancelled
    assert not is_cancelled(token)
    assert not is_cancelled(None)

    token.cancel()
    assert token.cancelled
    assert is_cancelled(token)

    token.reset()
    assert not token.cancelled


def test_tokens_are_independent():
    """Test that cancelling one token leaves others alone."""
    first, second = CancellationToken(), CancellationToken()
    first.cancel()

    assert not second.cancelled


def test_cancel_on_enter_sets_token_after_a_line():
    """Test the Enter listener."""
    token = CancellationToken()
    listener = cancel_on_enter(token, io.StringIO("\n"))
    listener.join(timeout=5)

    assert token.cancelled


def test_cancel_on_enter_ignores_end_of_input():
    """Test that closed input does not cancel."""
    token = CancellationToken()
    listener = cancel_on_enter(token, io.StringIO(""))
    listener.join(timeout=5)

    assert not token.cancelled


@pytest.mark.skipif(not hasattr(signal, "SIGINT") or os.name == "nt", reason="POSIX signals")
def test_interrupt_cancels_instead_of_raising():
    """Test that Ctrl-C sets the token and the handler is restored."""
    previous = signal.getsignal(signal.SIGINT)

    with cancel_on_interrupt(CancellationToken()) as token:
        signal.raise_signal(signal.SIGINT)
        assert token.cancelled

    assert signal.getsignal(signal.SIGINT) is previous


def test_interrupt_context_outside_main_thread():
    """Test the interrupt context in a worker thread."""
    seen = {}

    def _run():
        with cancel_on_interrupt(CancellationToken()) as token:
            seen["cancelled"] = token.cancelled

    worker = threading.Thread(target=_run)
    worker.start()
    worker.join(timeout=5)

    assert seen == {"cancelled": False}
