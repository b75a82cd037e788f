"""Local key-value scratch space.

Holds small string values that live on this device only: notification
dedup records, the notification permission and the theme preference.
"""

import json
import logging
import os
import re
from datetime import date
from pathlib import Path

from smartcal.dates import format_iso_date, parse_iso_date
from smartcal.exceptions import InvalidDateError, StoreError, ValidationError

logger = logging.getLogger(__name__)


class LocalKeyValueStore:
    """String key-value store backed by a single JSON file."""

    def __init__(self, path: Path):
        """Initialize store.

        Args:
            path: JSON file holding the values (created on first write)
        """
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Expected a JSON object in {self.path}")
        return data

    def _save(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise StoreError(f"Failed to write {self.path}: {e}") from e

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._load().get(key, default)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def keys(self, prefix: str = "") -> list[str]:
        return sorted(k for k in self._load() if k.startswith(prefix))


DEDUP_PREFIX = "notified_for_"
DEDUP_KEY_RE = re.compile(r"^notified_for_(\d{4}-\d{2}-\d{2})_adv(\d+)$")


class DedupRecordStore:
    """Markers for notifications that were already dispatched.

    A record is keyed by (target date, advance days). Writing a record
    twice is harmless.
    """

    def __init__(self, kv: LocalKeyValueStore):
        self.kv = kv

    @staticmethod
    def make_key(target: date, advance_days: int) -> str:
        return f"{DEDUP_PREFIX}{format_iso_date(target)}_adv{advance_days}"

    def is_recorded(self, key: str) -> bool:
        return self.kv.get(key) == "true"

    def record(self, key: str) -> None:
        self.kv.set(key, "true")

    def clear(self, key: str) -> None:
        self.kv.delete(key)

    def prune(self, before: date) -> list[str]:
        """Drop records whose target date is earlier than ``before``.

        Keys that do not follow the dedup key format are left alone.

        Returns:
            Removed keys.
        """
        removed = []
        for key in self.kv.keys(DEDUP_PREFIX):
            match = DEDUP_KEY_RE.match(key)
            if not match:
                continue
            try:
                target = parse_iso_date(match.group(1))
            except InvalidDateError:
                continue
            if target < before:
                self.kv.delete(key)
                removed.append(key)
        if removed:
            logger.info(f"Pruned {len(removed)} dedup record(s) before {before}")
        return removed


THEME_KEY = "theme"
THEMES = ("light", "dark")


class ThemePreference:
    """Light/dark theme choice kept in local state."""

    def __init__(self, kv: LocalKeyValueStore, default: str = "light"):
        self.kv = kv
        self.default = default

    def get_theme(self) -> str:
        theme = self.kv.get(THEME_KEY)
        return theme if theme in THEMES else self.default

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValidationError(f"Invalid theme: {theme}. Use 'light' or 'dark'.")
        self.kv.set(THEME_KEY, theme)
