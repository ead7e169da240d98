"""Cooperative cancellation for long-running graph algorithms."""

from contextlib import contextmanager
import logging
import signal
import sys
import threading
from typing import Iterator, TextIO

log = logging.getLogger(__name__)


class CancellationToken:
    """Flag set by a listener and polled by an algorithm loop.

    Create one per call. Algorithms only read it, so a cancelled run stops at
    its next poll and returns whatever it has computed so far.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def reset(self) -> None:
        self._event.clear()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"


def is_cancelled(token: CancellationToken | None) -> bool:
    return token is not None and token.cancelled


@contextmanager
def cancel_on_interrupt(token: CancellationToken) -> Iterator[CancellationToken]:
    """Route Ctrl-C to ``token`` instead of raising KeyboardInterrupt.

    Signal handlers can only be installed from the main thread; elsewhere
    the token is yielded unchanged and only explicit ``cancel()`` stops it.
    """
    if threading.current_thread() is not threading.main_thread():
        yield token
        return

    def _handler(signum, frame):
        log.info("Interrupt received, stopping at the next step")
        token.cancel()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield token
    finally:
        signal.signal(signal.SIGINT, previous)


def cancel_on_enter(
    token: CancellationToken, stream: TextIO | None = None
) -> threading.Thread:
    """Start a daemon thread that cancels ``token`` when a line is read.

    The thread exits after the first line or at end of input.
    """
    source = stream if stream is not None else sys.stdin

    def _listen() -> None:
        line = source.readline()
        if line:
            log.info("Stop requested from input")
            token.cancel()

    listener = threading.Thread(target=_listen, name="cancel-on-enter", daemon=True)
    listener.start()
    return listener
