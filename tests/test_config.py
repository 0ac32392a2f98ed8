"""Tests for runtime settings."""

import pytest

from engine.config import DEFAULT_RPM, MAX_RPM, Settings, clamp_rpm, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DEFAULT_RPM", "SEED", "FEED_INTERVAL_MS", "HISTORY_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(f"BOAT_CHART_{name}", raising=False)


class TestLoadSettings:
    def test_defaults(self):
        assert load_settings() == Settings()
        assert load_settings().default_rpm == DEFAULT_RPM

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BOAT_CHART_DEFAULT_RPM", "2500")
        monkeypatch.setenv("BOAT_CHART_SEED", "42")
        monkeypatch.setenv("BOAT_CHART_FEED_INTERVAL_MS", "100")
        monkeypatch.setenv("BOAT_CHART_HISTORY_SIZE", "50")
        monkeypatch.setenv("BOAT_CHART_LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings == Settings(
            default_rpm=2500.0, seed=42, feed_interval_ms=100,
            history_size=50, log_level="DEBUG",
        )

    def test_default_rpm_clamped(self, monkeypatch):
        monkeypatch.setenv("BOAT_CHART_DEFAULT_RPM", "12000")
        assert load_settings().default_rpm == MAX_RPM

    def test_invalid_values_fall_back(self, monkeypatch, caplog):
        monkeypatch.setenv("BOAT_CHART_SEED", "abc")
        monkeypatch.setenv("BOAT_CHART_FEED_INTERVAL_MS", "-5")
        monkeypatch.setenv("BOAT_CHART_HISTORY_SIZE", "1")
        monkeypatch.setenv("BOAT_CHART_LOG_LEVEL", "LOUD")
        with caplog.at_level("WARNING", logger="engine.config"):
            settings = load_settings()
        assert settings == Settings()
        assert len(caplog.records) == 4

    def test_nan_default_rpm_uses_default(self, monkeypatch):
        monkeypatch.setenv("BOAT_CHART_DEFAULT_RPM", "nan")
        assert load_settings().default_rpm == DEFAULT_RPM

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("BOAT_CHART_SEED", "  ")
        assert load_settings().seed is None


class TestClampRpm:
    def test_inside_domain(self):
        assert clamp_rpm(2750.0) == 2750.0

    def test_outside_domain(self):
        assert clamp_rpm(7000.0) == 6000.0
        assert clamp_rpm(-100.0) == 0.0
        assert clamp_rpm(float("inf")) == 6000.0

    def test_nan_uses_fallback(self):
        assert clamp_rpm(float("nan")) == DEFAULT_RPM
        assert clamp_rpm(float("nan"), fallback=3000.0) == 3000.0
