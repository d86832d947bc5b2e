"""A monotonic wall-clock timer."""

from __future__ import annotations

import time


class Timer:
    """Measures elapsed seconds on a monotonic clock."""

    def __init__(self) -> None:
        self._started: float | None = None
        self.elapsed: float | None = None

    def start(self) -> None:
        """Start (or restart) the timer."""
        self._started = time.perf_counter()
        self.elapsed = None

    def stop(self) -> float:
        """Stop the timer and return the seconds since start()."""
        if self._started is None:
            raise RuntimeError("timer was not started")
        self.elapsed = time.perf_counter() - self._started
        self._started = None
        return self.elapsed

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()