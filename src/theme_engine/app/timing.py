"""Startup phase timing.

`create_engine` measures each bootstrap phase (config load, seeding, user
theme load, initial activation) so slow storage or oversized theme sets show
up in the debug log and on the returned context.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from time import perf_counter
from typing import Iterator, List

__all__ = ["TimingEvent", "TimingLogger"]


@dataclass
class TimingEvent:
    name: str
    start: float
    end: float

    @property
    def duration(self) -> float:  # seconds
        return self.end - self.start


class TimingLogger:
    """Collects durations of named, non-overlapping phases.

    Usage:
        t = TimingLogger()
        with t.measure("seed_builtins"):
            store.restore_builtin_themes()
        t.stop()
    """

    def __init__(self) -> None:
        self._started_at = perf_counter()
        self._stopped_at: float | None = None
        self._events: List[TimingEvent] = []
        self._active: str | None = None

    @contextmanager
    def measure(self, name: str) -> Iterator[None]:
        if self._stopped_at is not None:
            raise RuntimeError("TimingLogger already stopped")
        if self._active is not None:
            raise RuntimeError(f"Phase '{name}' started while '{self._active}' still active")
        self._active = name
        start = perf_counter()
        try:
            yield
        finally:
            # Elapsed time is recorded even when the phase raised.
            self._events.append(TimingEvent(name=name, start=start, end=perf_counter()))
            self._active = None

    def stop(self) -> None:
        if self._stopped_at is None:
            self._stopped_at = perf_counter()

    @property
    def events(self) -> List[TimingEvent]:
        return list(self._events)

    @property
    def total_duration(self) -> float:
        end = self._stopped_at if self._stopped_at is not None else perf_counter()
        return end - self._started_at

    def as_dict(self) -> dict:
        return {
            "total_duration": self.total_duration,
            "events": [{"name": e.name, "duration": e.duration} for e in self._events],
        }
