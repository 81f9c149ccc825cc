from __future__ import annotations

from collections.abc import Iterator

import pytest

from summary_export.config import get_settings
from summary_export.observability.logging import reset_logging
from summary_export.summary import ResettableDistributionSummary


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for name in ("LOG_LEVEL", "LOG_JSON", "METRIC_KEY_PREFIX", "DEFAULT_DIMENSIONS"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture.
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    reset_logging()


@pytest.fixture
def summary() -> ResettableDistributionSummary:
    return ResettableDistributionSummary()
