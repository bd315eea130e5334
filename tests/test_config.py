from __future__ import annotations

from pathlib import Path

import pytest

from zcv.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ZCV_CHAT_DELAY", "ZCV_PHASE_DELAY", "ZCV_GENERATE_DELAY", "ZCV_ANALYZE_DELAY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("ZCV_EXPORT_DIR", raising=False)
    monkeypatch.delenv("ZCV_LOG_LEVEL", raising=False)

    settings = Settings.from_env()
    assert settings.chat_response_delay == 2.0
    assert settings.phase_advance_delay == 1.0
    assert settings.generate_delay == 3.0
    assert settings.analyze_delay == 2.0
    assert settings.export_dir == Path.cwd()
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ZCV_GENERATE_DELAY", "0.5")
    monkeypatch.setenv("ZCV_EXPORT_DIR", str(tmp_path))
    monkeypatch.setenv("ZCV_LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.generate_delay == 0.5
    assert settings.export_dir == tmp_path
    assert settings.log_level == "DEBUG"


def test_bad_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZCV_CHAT_DELAY", "soon")
    monkeypatch.setenv("ZCV_PHASE_DELAY", "-3")
    settings = Settings.from_env()
    assert settings.chat_response_delay == 2.0
    assert settings.phase_advance_delay == 0.0


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
    assert get_settings().generate_delay == 0.0


def test_db_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_URL", "sqlite:///:memory:")
    assert Settings.from_env().db_url == "sqlite:///:memory:"

    monkeypatch.delenv("DB_URL")
    assert Settings.from_env().db_url.endswith("zcv_cache.db")
