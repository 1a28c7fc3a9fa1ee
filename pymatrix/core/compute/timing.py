"""
Wall-clock timing for matrix operations.

The parallel path reports how long it spent submitting row tasks and how
long it waited on them; the sequential path reports only the total.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating wall-clock timer with named phases.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('join'):
            wait_for_rows()
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'join': ...}
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to phase `name`."""
        begin = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = (
                self._phases.get(name, 0.0) + time.perf_counter() - begin
            )

    def result(self) -> dict[str, float]:
        """
        Total and per-phase seconds.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._phases}
