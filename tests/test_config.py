"""Tests for configuration."""

import os
from pathlib import Path

import pytest

from smartcal.config import AppConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "SMARTCAL_DATA_DIR",
        "LOG_DIR",
        "LOG_FILENAME",
        "SMARTCAL_OWNER",
        "WEATHER_API_URL",
        "WEATHER_LAT",
        "WEATHER_LON",
        "WEATHER_TIMEOUT",
        "GEMINI_API_KEY",
        "API_KEY",
        "GEMINI_MODEL",
        "DEDUP_RETENTION_DAYS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_app_config_defaults():
    """Test AppConfig default values."""
    config = AppConfig()
    assert config.data_dir == Path("data")
    assert config.events_path == Path("data/events.json")
    assert config.settings_path == Path("data/settings.json")
    assert config.local_state_path == Path("data/local_state.json")
    assert config.owner_id == "local"
    assert (config.weather_lat, config.weather_lon) == (37.5665, 126.9780)
    assert config.gemini_api_key is None
    assert config.dedup_retention_days == 30


def test_app_config_from_env_all_vars(monkeypatch):
    """Test loading config values from environment."""
    monkeypatch.setenv("SMARTCAL_DATA_DIR", "/custom/data")
    monkeypatch.setenv("LOG_DIR", "/custom/logs")
    monkeypatch.setenv("SMARTCAL_OWNER", "alice")
    monkeypatch.setenv("WEATHER_LAT", "35.1796")
    monkeypatch.setenv("WEATHER_LON", "129.0756")
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    monkeypatch.setenv("DEDUP_RETENTION_DAYS", "7")

    config = AppConfig.from_env()
    assert config.events_path == Path("/custom/data/events.json")
    assert config.log_dir == Path("/custom/logs")
    assert config.owner_id == "alice"
    assert config.weather_lat == 35.1796
    assert config.weather_lon == 129.0756
    assert config.gemini_api_key == "secret"
    assert config.gemini_model == "gemini-2.5-pro"
    assert config.dedup_retention_days == 7


def test_app_config_api_key_fallback(monkeypatch):
    """API_KEY is used when GEMINI_API_KEY is not set."""
    monkeypatch.setenv("API_KEY", "fallback")
    assert AppConfig.from_env().gemini_api_key == "fallback"


def test_app_config_invalid_numbers_fall_back(monkeypatch):
    """Test handling invalid numeric values."""
    monkeypatch.setenv("WEATHER_LAT", "north")
    monkeypatch.setenv("DEDUP_RETENTION_DAYS", "forever")
    config = AppConfig.from_env()
    assert config.weather_lat == 37.5665
    assert config.dedup_retention_days == 30


def test_app_config_from_env_file(tmp_path, monkeypatch):
    """Test loading config from .env file."""
    (tmp_path / ".env").write_text("SMARTCAL_OWNER=from-dotenv\n")

    original_cwd = os.getcwd()
    try:
        os.chdir(tmp_path)
        config = AppConfig.from_env()
        # Depends on where python-dotenv starts its search
        assert config.owner_id in ("from-dotenv", "local")
    finally:
        os.chdir(original_cwd)
        os.environ.pop("SMARTCAL_OWNER", None)
