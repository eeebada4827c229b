# hotel_search/services/timers.py
from __future__ import annotations

import itertools
import threading
import time
from contextlib import contextmanager
from typing import Any, Iterator


class Timers:
    """
    Named wall-clock timers. A timer id ties each end() to its start(), so the same
    name can be timed concurrently from several worker threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._running: dict[int, tuple[str, float]] = {}
        self._samples: dict[str, list[float]] = {}

    def start(self, name: str) -> int:
        timer_id = next(self._ids)
        with self._lock:
            self._running[timer_id] = (name, time.perf_counter())
        return timer_id

    def end(self, name: str, timer_id: int) -> float:
        """Stop a running timer and return its duration in milliseconds."""
        with self._lock:
            started = self._running.pop(timer_id, None)
            if started is None or started[0] != name:
                raise KeyError(f"No running timer {name!r} with id {timer_id}")
            elapsed_ms = (time.perf_counter() - started[1]) * 1000
            self._samples.setdefault(name, []).append(elapsed_ms)
        return elapsed_ms

    @contextmanager
    def timer(self, name: str) -> Iterator[None]:
        timer_id = self.start(name)
        try:
            yield
        finally:
            self.end(name, timer_id)

    def summary(self) -> dict[str, dict[str, Any]]:
        with self._lock:
            samples = {k: list(v) for k, v in self._samples.items()}
        out: dict[str, dict[str, Any]] = {}
        for name, values in sorted(samples.items()):
            total = sum(values)
            out[name] = {
                "count": len(values),
                "total_ms": round(total, 3),
                "avg_ms": round(total / len(values), 3) if values else 0.0,
            }
        return out

    def reset(self) -> None:
        with self._lock:
            self._running.clear()
            self._samples.clear()


class NullTimers(Timers):
    """Drop-in collector that records nothing."""

    def start(self, name: str) -> int:
        return 0

    def end(self, name: str, timer_id: int) -> float:
        return 0.0

    @contextmanager
    def timer(self, name: str) -> Iterator[None]:
        yield

    def summary(self) -> dict[str, dict[str, Any]]:
        return {}
