from __future__ import annotations

from stp_backend.config import Settings


def test_defaults():
    settings = Settings()

    assert settings.max_periods == 100
    assert settings.months_per_period == 12
    assert "http://localhost:5173" in settings.cors_origins


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STP_MAX_PERIODS", "7")
    monkeypatch.setenv("STP_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.max_periods == 7
    assert settings.log_level == "DEBUG"
