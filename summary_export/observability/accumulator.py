from __future__ import annotations

from dataclasses import dataclass
from threading import Lock


@dataclass(frozen=True)
class SummarySnapshot:
    min: float
    max: float
    total: float
    count: int

    def has_values(self) -> bool:
        return self.count > 0


@dataclass(frozen=True)
class HistogramSnapshot:
    """Histogram-shaped snapshot; percentiles and buckets stay empty for summaries."""

    count: int
    total: float
    max: float
    percentile_values: tuple[tuple[float, float], ...] = ()
    histogram_counts: tuple[tuple[float, float], ...] = ()

    @classmethod
    def empty(cls, count: int, total: float, max: float) -> HistogramSnapshot:
        return cls(count=count, total=total, max=max)


class Accumulator:
    """Thread-safe running count/total/min/max with an atomic drain.

    All four fields change under one lock, so a concurrent ``record`` ends up
    either in the snapshot returned by ``snapshot_and_reset`` or in the state
    that follows it, never half in each.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._count: int = 0
        self._total: float = 0.0
        self._max: float | None = None
        self._min: float | None = None

    def record(self, amount: float) -> None:
        # Callers filter negative amounts before getting here.
        with self._lock:
            self._count += 1
            self._total += amount
            if self._max is None or amount > self._max:
                self._max = amount
            if self._min is None or amount < self._min:
                self._min = amount

    def count(self) -> int:
        return self._count

    def total(self) -> float:
        return self._total

    def max(self) -> float:
        value = self._max
        return 0.0 if value is None else value

    def min(self) -> float:
        value = self._min
        return 0.0 if value is None else value

    def has_values(self) -> bool:
        return self.count() > 0

    def snapshot(self) -> SummarySnapshot:
        with self._lock:
            return self._capture()

    def snapshot_and_reset(self) -> SummarySnapshot:
        with self._lock:
            snapshot = self._capture()
            self._clear()
            return snapshot

    def reset(self) -> None:
        with self._lock:
            self._clear()

    def _capture(self) -> SummarySnapshot:
        # Lock must be held.
        if self._min is None or self._max is None:
            return SummarySnapshot(min=0.0, max=0.0, total=0.0, count=0)
        return SummarySnapshot(min=self._min, max=self._max, total=self._total, count=self._count)

    def _clear(self) -> None:
        self._count = 0
        self._total = 0.0
        self._max = None
        self._min = None
