from __future__ import annotations

import pytest
from pydantic import ValidationError

from summary_export.config import Settings, get_settings
from summary_export.models.schemas import DistributionStatisticConfig


def test_defaults() -> None:
    settings = get_settings()

    assert settings.log_level == "INFO"
    assert settings.log_json is True
    assert settings.metric_key_prefix == ""
    assert settings.default_dimensions == {}
    assert settings.prefixed("requests") == "requests"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "false")
    monkeypatch.setenv("METRIC_KEY_PREFIX", "shop")
    monkeypatch.setenv("DEFAULT_DIMENSIONS", '{"region": "eu-1"}')

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    assert settings.default_dimensions == {"region": "eu-1"}
    assert settings.prefixed("orders") == "shop.orders"


def test_reads_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("METRIC_KEY_PREFIX=from.env\n", encoding="utf-8")

    assert Settings().metric_key_prefix == "from.env"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_distribution_config_default_detection() -> None:
    assert DistributionStatisticConfig.none().is_default() is True
    assert DistributionStatisticConfig(percentiles=(0.95,)).is_default() is False
    assert DistributionStatisticConfig(expiry_seconds=60).is_default() is False


def test_distribution_config_is_frozen() -> None:
    config = DistributionStatisticConfig()

    with pytest.raises(ValidationError):
        config.percentile_histogram = True  # type: ignore[misc]
