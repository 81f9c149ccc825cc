from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DistributionStatisticConfig(BaseModel):
    """Histogram/percentile settings a summary may be handed.

    Resettable summaries export min/max/sum/count only, so these values are
    accepted for API compatibility and otherwise ignored.
    """

    model_config = ConfigDict(frozen=True)

    percentiles: tuple[float, ...] = Field(default=())
    percentile_histogram: bool | None = None
    percentile_precision: int | None = None
    service_level_objectives: tuple[float, ...] = Field(default=())
    minimum_expected_value: float | None = None
    maximum_expected_value: float | None = None
    expiry_seconds: float | None = None
    buffer_length: int | None = None

    @classmethod
    def none(cls) -> DistributionStatisticConfig:
        return cls()

    def is_default(self) -> bool:
        return self == DistributionStatisticConfig()
