from datetime import date

import pytest

from smartcal import create_app
from smartcal.config import AppConfig
from smartcal.models.event import ContactEvent, PersonalEvent
from smartcal.storage.event_store import JsonEventStore
from smartcal.storage.kv_store import DedupRecordStore, LocalKeyValueStore
from smartcal.storage.settings_store import JsonSettingsStore

# A Sunday; the next day is part of the Seollal holidays
TODAY = date(2026, 2, 15)


@pytest.fixture
def config(tmp_path):
    """Config with all files under a temporary directory."""
    return AppConfig(data_dir=tmp_path / "data", log_dir=tmp_path / "logs")


@pytest.fixture
def app(config):
    """Create and configure a Flask app for testing."""
    app = create_app(config, today=lambda: TODAY)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def event_store(tmp_path):
    return JsonEventStore(tmp_path / "events.json")


@pytest.fixture
def settings_store(tmp_path):
    return JsonSettingsStore(tmp_path / "settings.json")


@pytest.fixture
def kv(tmp_path):
    return LocalKeyValueStore(tmp_path / "local_state.json")


@pytest.fixture
def dedup_store(kv):
    return DedupRecordStore(kv)


@pytest.fixture
def chuseok_trip():
    """Thursday to Saturday, skipping the Saturday."""
    return PersonalEvent(
        id="trip",
        owner_id="u1",
        title="Chuseok trip",
        start_date=date(2026, 9, 24),
        end_date=date(2026, 9, 26),
        exclude_saturday=True,
    )


@pytest.fixture
def dentist():
    return PersonalEvent(
        id="dentist",
        owner_id="u1",
        title="Dentist",
        start_date=date(2026, 2, 16),
        end_date=date(2026, 2, 16),
    )


@pytest.fixture
def call_mom():
    return ContactEvent(
        id="mom",
        owner_id="u1",
        title="Call mom",
        phone_number="010-1234-5678",
        date=date(2026, 2, 16),
    )


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at temporary data/log directories with no AI key."""
    monkeypatch.setenv("SMARTCAL_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("SMARTCAL_OWNER", "u1")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    return tmp_path
