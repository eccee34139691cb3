"""A timer that calls a function after an interval, once or periodically."""

from __future__ import annotations

import threading
from collections.abc import Callable

__all__ = ["IntervalTimer"]


class IntervalTimer:
    """Calls a callback from a background thread after ``interval`` seconds.

    With ``periodic`` true the callback is called again after every further
    interval until :meth:`stop` is called.
    """

    def __init__(self, interval: float, periodic: bool = False) -> None:
        if isinstance(interval, bool) or not isinstance(interval, (int, float)):
            raise TypeError(f"interval must be a number, not {type(interval).__name__}")
        if interval < 0:
            raise ValueError(f"interval must not be negative: {interval}")
        self._interval = interval
        self._periodic = bool(periodic)
        self._stopped = threading.Event()
        self._stopped.set()
        self._thread: threading.Thread | None = None

    @property
    def interval(self) -> float:
        """Seconds between start and each call."""
        return self._interval

    @property
    def periodic(self) -> bool:
        """Whether the callback repeats."""
        return self._periodic

    @property
    def running(self) -> bool:
        """True while the timer thread is alive and not stopped."""
        thread = self._thread
        return thread is not None and thread.is_alive() and not self._stopped.is_set()

    def start(self, callback: Callable[[], object]) -> None:
        """Start the timer thread that will call ``callback``."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        stopped = threading.Event()
        self._stopped = stopped
        interval = self._interval
        periodic = self._periodic

        def run() -> None:
            while not stopped.wait(interval):
                callback()
                if not periodic:
                    break

        thread = threading.Thread(target=run, name="IntervalTimer", daemon=True)
        self._thread = thread
        thread.start()

    def stop(self) -> None:
        """Stop the timer; no further calls are made."""
        self._stopped.set()

    def join(self, timeout: float | None = None) -> None:
        """Wait for the timer thread to finish."""
        if self._thread is not None:
            self._thread.join(timeout)

    def __enter__(self) -> IntervalTimer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()