"""Per-owner notification settings store."""

import json
import logging
import os
from pathlib import Path
from typing import Protocol

import pydantic

from smartcal.exceptions import StoreError
from smartcal.models.settings import (
    DEFAULT_SETTINGS,
    NotificationSettings,
    SettingsUpdate,
    apply_update,
)

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    """Protocol for settings stores."""

    def get(self, owner_id: str) -> NotificationSettings | None:
        """Return the owner's settings, or None if never saved."""
        ...

    def put(self, owner_id: str, settings: NotificationSettings) -> None:
        ...


class JsonSettingsStore:
    """Settings store backed by a JSON object keyed by owner id."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Expected a JSON object in {self.path}")
        return data

    def get(self, owner_id: str) -> NotificationSettings | None:
        data = self._load().get(owner_id)
        if data is None:
            return None
        try:
            return NotificationSettings.model_validate(data)
        except pydantic.ValidationError as e:
            raise StoreError(f"Invalid settings for '{owner_id}': {e}") from e

    def put(self, owner_id: str, settings: NotificationSettings) -> None:
        data = self._load()
        data[owner_id] = settings.model_dump()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise StoreError(f"Failed to write {self.path}: {e}") from e


def load_or_create(store: SettingsStore, owner_id: str) -> NotificationSettings:
    """Return the owner's settings, saving defaults on first access."""
    settings = store.get(owner_id)
    if settings is None:
        logger.info(f"Creating default notification settings for '{owner_id}'")
        settings = DEFAULT_SETTINGS
        store.put(owner_id, settings)
    return settings


def update_settings(
    store: SettingsStore, owner_id: str, update: SettingsUpdate
) -> NotificationSettings:
    """Read-modify-write the owner's settings with a typed update."""
    settings = apply_update(load_or_create(store, owner_id), update)
    store.put(owner_id, settings)
    return settings
