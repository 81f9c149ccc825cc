from __future__ import annotations

import re
from collections.abc import Mapping

import structlog

from summary_export.config import Settings, get_settings
from summary_export.formatting import FormatMode, format_value
from summary_export.observability.accumulator import SummarySnapshot
from summary_export.summary import ResettableDistributionSummary


_ESCAPE_RE = re.compile(r'([\\,= "])')
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_INVALID_KEY_RE = re.compile(r"[^A-Za-z0-9_.-]+")


def _normalize_key(key: str) -> str:
    return _INVALID_KEY_RE.sub("_", key)


def _escape_dimension_value(value: str) -> str:
    # Control characters would split the line.
    return _ESCAPE_RE.sub(r"\\\1", _CONTROL_RE.sub("", value))


def format_summary_line(
    metric_key: str,
    snapshot: SummarySnapshot,
    dimensions: Mapping[str, str] | None = None,
    mode: FormatMode = FormatMode.PLAIN,
) -> str:
    """Render ``key[,dim=value...] gauge,min=..,max=..,sum=..,count=..``."""

    if not metric_key:
        raise ValueError("metric_key must not be empty")
    if _INVALID_KEY_RE.search(metric_key):
        raise ValueError(f"metric_key {metric_key!r} may only contain letters, digits, '_', '.' and '-'")

    dims = {_normalize_key(str(name)): str(value) for name, value in (dimensions or {}).items() if name}
    head = metric_key
    for name in sorted(dims):
        head += f",{name}={_escape_dimension_value(dims[name])}"

    payload = ",".join(
        [
            f"min={format_value(snapshot.min, mode)}",
            f"max={format_value(snapshot.max, mode)}",
            f"sum={format_value(snapshot.total, mode)}",
            f"count={snapshot.count}",
        ]
    )
    return f"{head} gauge,{payload}"


def export_summary(
    metric_key: str,
    summary: ResettableDistributionSummary,
    dimensions: Mapping[str, str] | None = None,
    settings: Settings | None = None,
) -> str | None:
    """Drain ``summary`` and return its line, or None when nothing was recorded."""

    settings = settings or get_settings()
    snapshot = summary.take_summary_snapshot_and_reset()
    if not snapshot.has_values():
        return None

    merged = {**settings.default_dimensions, **(dimensions or {})}
    line = format_summary_line(settings.prefixed(metric_key), snapshot, merged)
    structlog.get_logger(__name__).debug("summary_exported", metric_key=metric_key, count=snapshot.count)
    return line
