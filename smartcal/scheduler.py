"""Advance notifications for upcoming events.

``NotificationScheduler.evaluate`` decides whether a notification is due.
It only reads the dedup records; ``NotificationService`` performs the
dispatch and records the dedup key once the sink reports success.

Two evaluations racing between the dedup check and the post-dispatch
write may both dispatch. Dedup writes are idempotent, so this resolves
itself on the next evaluation.
"""

import logging
from datetime import date, timedelta
from typing import Iterable

from typing_extensions import assert_never

from smartcal.dates import add_days
from smartcal.models.event import ContactEvent, HolidayEvent, PersonalEvent
from smartcal.models.notification import NotificationRequest, PermissionStatus
from smartcal.models.settings import NotificationSettings
from smartcal.occurrence import occurs_on
from smartcal.providers.notifications import NotificationSink
from smartcal.storage.kv_store import DedupRecordStore

logger = logging.getLogger(__name__)

PERSONAL_LABEL = "📅 일정"
HOLIDAY_LABEL = "🚩 공휴일"


def notification_title(advance_days: int) -> str:
    """Lead-time dependent notification title."""
    if advance_days == 0:
        return "오늘의 일정 안내"
    return f"{advance_days}일 후 일정 안내"


def notification_line(event) -> str:
    """Body line for one due event."""
    if isinstance(event, PersonalEvent):
        label = PERSONAL_LABEL
    elif isinstance(event, HolidayEvent):
        label = HOLIDAY_LABEL
    elif isinstance(event, ContactEvent):
        raise ValueError("Contact events are not notified")
    else:
        assert_never(event)
    return f"{label}: {event.title}"


class NotificationScheduler:
    """Decide whether an advance notification should fire today."""

    def __init__(self, dedup_store: DedupRecordStore):
        self.dedup_store = dedup_store

    def due_events(
        self,
        target: date,
        settings: NotificationSettings,
        personal_events: Iterable,
        holidays: Iterable[HolidayEvent],
    ) -> list:
        """Events on ``target`` that the settings want notified.

        Personal events count only when not completed; contacts never count.
        """
        due = []
        if settings.notify_personal:
            due.extend(
                e
                for e in personal_events
                if isinstance(e, PersonalEvent)
                and not e.completed
                and occurs_on(target, e)
            )
        if settings.notify_holidays:
            due.extend(h for h in holidays if occurs_on(target, h))
        return due

    def evaluate(
        self,
        today: date,
        settings: NotificationSettings,
        personal_events: Iterable,
        holidays: Iterable[HolidayEvent],
        permission: PermissionStatus = PermissionStatus.GRANTED,
    ) -> NotificationRequest | None:
        """Return the notification to emit today, or None.

        Disabled settings, missing permission, an existing dedup record and
        an empty target day are all silent no-ops. Nothing is recorded
        here; an event added later for the same target day can still fire.
        """
        if not settings.enabled:
            logger.debug("Notifications disabled")
            return None
        if permission != PermissionStatus.GRANTED:
            logger.debug(f"Notification permission is {permission.value}")
            return None

        target = add_days(today, settings.advance_days)
        dedup_key = DedupRecordStore.make_key(target, settings.advance_days)
        if self.dedup_store.is_recorded(dedup_key):
            logger.debug(f"Already notified: {dedup_key}")
            return None

        due = self.due_events(target, settings, personal_events, holidays)
        if not due:
            logger.debug(f"Nothing due on {target}")
            return None

        return NotificationRequest(
            title=notification_title(settings.advance_days),
            body="\n".join(notification_line(e) for e in due),
            dedup_key=dedup_key,
            target_date=target,
            advance_days=settings.advance_days,
        )


class NotificationService:
    """Evaluate, dispatch and record advance notifications."""

    def __init__(
        self,
        scheduler: NotificationScheduler,
        sink: NotificationSink,
        retention_days: int | None = None,
    ):
        """Initialize service.

        Args:
            scheduler: Scheduler deciding what is due
            sink: Platform notification sink
            retention_days: Prune dedup records whose target date is older
                than this many days before today (None keeps everything)
        """
        self.scheduler = scheduler
        self.sink = sink
        self.retention_days = retention_days

    @property
    def dedup_store(self) -> DedupRecordStore:
        return self.scheduler.dedup_store

    def run(
        self,
        today: date,
        settings: NotificationSettings,
        personal_events: Iterable,
        holidays: Iterable[HolidayEvent],
    ) -> NotificationRequest | None:
        """Dispatch today's notification if one is due.

        Returns:
            The dispatched request, or None when nothing was dispatched.
        """
        if self.retention_days is not None:
            self.dedup_store.prune(today - timedelta(days=self.retention_days))

        request = self.scheduler.evaluate(
            today,
            settings,
            personal_events,
            holidays,
            permission=self.sink.permission_status(),
        )
        if request is None:
            return None

        try:
            delivered = self.sink.dispatch(request.title, request.body)
        except Exception as e:
            logger.warning(f"Notification dispatch failed: {e}")
            return None
        if not delivered:
            logger.warning("Notification sink did not deliver the notification")
            return None

        self.dedup_store.record(request.dedup_key)
        logger.info(f"Notified for {request.target_date} ({request.dedup_key})")
        return request
