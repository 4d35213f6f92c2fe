# src/prompt_context/progress.py
import signal
import sys
import threading
from contextlib import contextmanager


class NullProgress:
    """Progress sink that reports nothing and is never cancelled."""

    def report(self, message: str) -> None:
        pass

    def is_cancelled(self) -> bool:
        return False


class ConsoleProgress:
    """
    Prints progress lines to stderr when verbose.
    While `interruptible()` is active, Ctrl+C requests cancellation instead
    of raising KeyboardInterrupt, so the build can return a partial result.
    """

    def __init__(self, verbose: bool = False, stream=None):
        self.verbose = verbose
        self.stream = stream if stream is not None else sys.stderr
        self._cancelled = threading.Event()

    def report(self, message: str) -> None:
        if self.verbose:
            print(f"  > {message}", file=self.stream)

    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    @contextmanager
    def interruptible(self):
        if threading.current_thread() is not threading.main_thread():
            yield self
            return

        def _on_sigint(signum, frame):
            self.cancel()

        previous = signal.signal(signal.SIGINT, _on_sigint)
        try:
            yield self
        finally:
            signal.signal(signal.SIGINT, previous)
