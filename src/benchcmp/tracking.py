"""Recording of named samples, counters and timed sections."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

from benchcmp.stats import Stats, summarize

logger = logging.getLogger(__name__)


class Tracker:
    """
    Collects named samples and counters.

    Samples are reduced to Stats on demand; the tracker itself does no
    statistics beyond storing values.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int | float] = {}
        self._samples: dict[str, list[float]] = {}

    @property
    def counters(self) -> dict[str, int | float]:
        """Return a copy of the counters recorded so far."""
        return dict(self._counters)

    def count(self, name: str, val: int | float = 1) -> None:
        """Increment counter ``name`` by ``val``."""
        self._counters[name] = self._counters.get(name, 0) + val

    def add(self, name: str, value: float) -> None:
        """Append a measurement to sample ``name``."""
        self._samples.setdefault(name, []).append(value)

    def samples(self, name: str) -> list[float]:
        """Return a copy of the measurements recorded under ``name``."""
        return list(self._samples.get(name, []))

    def stats(self, pop: bool = False) -> dict[str, Stats]:
        """
        Summarize every recorded sample.

        Args:
            pop: Clear the recorded samples after summarizing them

        Returns:
            Mapping of sample name to Stats
        """
        result = {name: summarize(values) for name, values in self._samples.items() if values}
        if pop:
            self._samples.clear()
        return result


class Timer(Tracker):
    """
    Tracker that also measures wall-clock time.

    Durations are recorded in milliseconds.
    """

    def __init__(self) -> None:
        super().__init__()
        self._start: float | None = None
        self._stop: float | None = None

    @property
    def duration(self) -> float | None:
        """Elapsed ms since ``start()``; fixed once stopped, None if never started."""
        if self._start is None:
            return None
        end = self._stop if self._stop is not None else time.perf_counter()
        return (end - self._start) * 1000

    def start(self) -> None:
        """Start (or restart) the overall timer."""
        self._start = time.perf_counter()
        self._stop = None
        logger.info("Timer started")

    def stop(self) -> None:
        """Stop the overall timer."""
        if self._start is None:
            raise RuntimeError("Timer was never started")
        self._stop = time.perf_counter()
        logger.info(f"Timer stopped after {self.duration:.3f}ms")

    @contextmanager
    def time(self, name: str) -> Iterator[None]:
        """
        Time a block of code and record its duration under ``name``.

        Example:
            with timer.time("parse"):
                parse(document)
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            self.add(name, (time.perf_counter() - start) * 1000)
