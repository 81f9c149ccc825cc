from __future__ import annotations

import math
from typing import Any, Protocol

import structlog

from summary_export.models.schemas import DistributionStatisticConfig
from summary_export.observability.accumulator import Accumulator, HistogramSnapshot, SummarySnapshot


class DistributionSummary(Protocol):
    """What a meter registry needs from a distribution summary."""

    def record(self, amount: float) -> None: ...

    def count(self) -> int: ...

    def total_amount(self) -> float: ...

    def max(self) -> float: ...

    def take_snapshot(self) -> HistogramSnapshot: ...


class ResettableDistributionSummary:
    """Distribution summary whose statistics are drained on every export.

    Percentile and histogram tracking are disabled: only count, total, min and
    max are kept. Anomalies (negative amounts, time units, histogram config)
    are never fatal; they are dropped or ignored, with a notice on ``logger``
    where it helps the caller.
    """

    def __init__(
        self,
        config: DistributionStatisticConfig | None = None,
        *,
        scale: float = 1.0,
        logger: Any | None = None,
    ) -> None:
        if not scale >= 0:
            raise ValueError(f"scale must be non-negative, got {scale!r}")
        self._accumulator = Accumulator()
        self._scale = float(scale)
        self._log = logger if logger is not None else structlog.get_logger(__name__)

        if config is not None and not config.is_default():
            self._log.warning(
                "distribution_config_ignored",
                reason="percentiles and histograms are not tracked by resettable summaries",
            )

    def record(self, amount: float) -> None:
        # NaN fails the comparison too.
        if not amount >= 0:
            return
        scaled = self._scale * amount
        if math.isnan(scaled):
            return
        self._accumulator.record(scaled)

    def count(self) -> int:
        return self._accumulator.count()

    def total_amount(self) -> float:
        return self._accumulator.total()

    def max(self) -> float:
        return self._accumulator.max()

    def min(self) -> float:
        return self._accumulator.min()

    def has_values(self) -> bool:
        return self._accumulator.has_values()

    def take_summary_snapshot(self, time_unit: Any | None = None) -> SummarySnapshot:
        self._ignore_time_unit(time_unit)
        return self._accumulator.snapshot()

    def take_summary_snapshot_and_reset(self, time_unit: Any | None = None) -> SummarySnapshot:
        self._ignore_time_unit(time_unit)
        return self._accumulator.snapshot_and_reset()

    def take_snapshot(self) -> HistogramSnapshot:
        self._log.warning("percentiles_unavailable", detail="no percentiles will be exported")
        snapshot = self._accumulator.snapshot()
        return HistogramSnapshot.empty(snapshot.count, snapshot.total, snapshot.max)

    def _ignore_time_unit(self, time_unit: Any | None) -> None:
        if time_unit is None:
            return
        self._log.debug("time_unit_ignored", time_unit=str(time_unit))
