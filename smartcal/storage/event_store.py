"""Event store for personal and contact events."""

import json
import logging
import os
from pathlib import Path
from typing import Callable, Protocol

from smartcal.exceptions import EventNotFoundError, StoreError, ValidationError
from smartcal.models.event import (
    ContactEvent,
    EventPatch,
    HolidayEvent,
    PersonalEvent,
    apply_patch,
    parse_user_event,
)

logger = logging.getLogger(__name__)

Snapshot = list[PersonalEvent | ContactEvent]
SnapshotCallback = Callable[[Snapshot], None]


class EventStore(Protocol):
    """Protocol for event stores."""

    def subscribe(self, owner_id: str, callback: SnapshotCallback) -> Callable[[], None]:
        """Deliver the owner's events now and after every change.

        Returns:
            A function that cancels the subscription.
        """
        ...

    def list(self, owner_id: str) -> Snapshot:
        ...

    def get(self, event_id: str) -> PersonalEvent | ContactEvent:
        ...

    def create(self, event: PersonalEvent | ContactEvent) -> PersonalEvent | ContactEvent:
        ...

    def update(self, event_id: str, patch: EventPatch) -> PersonalEvent | ContactEvent:
        ...

    def delete(self, event_id: str) -> None:
        ...


class JsonEventStore:
    """Event store backed by a JSON document file.

    Subscribers receive a complete fresh snapshot of their owner's events on
    every change; nothing is patched incrementally.
    """

    def __init__(self, path: Path):
        """Initialize store.

        Args:
            path: JSON file holding the event documents
        """
        self.path = Path(path)
        self._subscribers: dict[str, list[SnapshotCallback]] = {}

    def _load(self) -> list[PersonalEvent | ContactEvent]:
        if not self.path.exists():
            return []
        try:
            documents = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(documents, list):
            raise StoreError(f"Expected a JSON list in {self.path}")
        return [parse_user_event(doc) for doc in documents]

    def _save(self, events: list[PersonalEvent | ContactEvent]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        documents = [e.model_dump(mode="json", exclude_none=True) for e in events]
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp.write_text(
                json.dumps(documents, indent=2, ensure_ascii=False), encoding="utf-8"
            )
            os.replace(tmp, self.path)
        except OSError as e:
            raise StoreError(f"Failed to write {self.path}: {e}") from e

    def _notify(self, owner_id: str | None) -> None:
        if owner_id is None:
            return
        callbacks = list(self._subscribers.get(owner_id, []))
        if not callbacks:
            return
        snapshot = self.list(owner_id)
        for callback in callbacks:
            callback(list(snapshot))

    def subscribe(self, owner_id: str, callback: SnapshotCallback) -> Callable[[], None]:
        self._subscribers.setdefault(owner_id, []).append(callback)
        callback(self.list(owner_id))

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(owner_id, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def list(self, owner_id: str) -> Snapshot:
        return [e for e in self._load() if e.owner_id == owner_id]

    def get(self, event_id: str) -> PersonalEvent | ContactEvent:
        for event in self._load():
            if event.id == event_id:
                return event
        raise EventNotFoundError(f"Event '{event_id}' not found")

    def create(self, event: PersonalEvent | ContactEvent) -> PersonalEvent | ContactEvent:
        """Store a new event.

        Raises:
            ValidationError: If the event is a holiday or its id is taken.
        """
        if isinstance(event, HolidayEvent):
            raise ValidationError("Holidays are generated and cannot be stored")
        events = self._load()
        if any(e.id == event.id for e in events):
            raise ValidationError(f"Event id '{event.id}' already exists")
        events.append(event)
        self._save(events)
        logger.info(f"Created {event.kind} event {event.id} ({event.title})")
        self._notify(event.owner_id)
        return event

    def update(self, event_id: str, patch: EventPatch) -> PersonalEvent | ContactEvent:
        """Apply a typed patch to an event.

        Raises:
            EventNotFoundError: If no event has this id.
            ValidationError: If the patched event is invalid.
        """
        events = self._load()
        for index, event in enumerate(events):
            if event.id == event_id:
                updated = apply_patch(event, patch)
                events[index] = updated
                self._save(events)
                logger.info(f"Updated event {event_id}")
                self._notify(updated.owner_id)
                return updated
        raise EventNotFoundError(f"Event '{event_id}' not found")

    def delete(self, event_id: str) -> None:
        """Delete an event.

        Raises:
            EventNotFoundError: If no event has this id.
        """
        events = self._load()
        remaining = [e for e in events if e.id != event_id]
        if len(remaining) == len(events):
            raise EventNotFoundError(f"Event '{event_id}' not found")
        owner_id = next(e.owner_id for e in events if e.id == event_id)
        self._save(remaining)
        logger.info(f"Deleted event {event_id}")
        self._notify(owner_id)
