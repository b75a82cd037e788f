"""Storage layer: event store, settings store and local key-value state."""

from smartcal.storage.event_store import EventStore, JsonEventStore
from smartcal.storage.kv_store import DedupRecordStore, LocalKeyValueStore, ThemePreference
from smartcal.storage.settings_store import (
    JsonSettingsStore,
    SettingsStore,
    load_or_create,
    update_settings,
)

__all__ = [
    "EventStore",
    "JsonEventStore",
    "DedupRecordStore",
    "LocalKeyValueStore",
    "ThemePreference",
    "JsonSettingsStore",
    "SettingsStore",
    "load_or_create",
    "update_settings",
]
