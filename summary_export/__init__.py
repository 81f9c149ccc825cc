from summary_export.formatting import FormatMode, decimal_or_nan, format_value, whole_or_decimal
from summary_export.models.schemas import DistributionStatisticConfig
from summary_export.observability.accumulator import Accumulator, HistogramSnapshot, SummarySnapshot
from summary_export.summary import DistributionSummary, ResettableDistributionSummary

__all__ = [
    "Accumulator",
    "DistributionStatisticConfig",
    "DistributionSummary",
    "FormatMode",
    "HistogramSnapshot",
    "ResettableDistributionSummary",
    "SummarySnapshot",
    "decimal_or_nan",
    "format_value",
    "whole_or_decimal",
]
