"""Calendar query module for filtering and selecting events."""

from datetime import date, timedelta

from smartcal.dates import add_days, parse_iso_date
from smartcal.models.event import ContactEvent, PersonalEvent
from smartcal.occurrence import occurrences_for_day


class EventQuery:
    """Filter and select events for views.

    Day-based queries go through the occurrence resolver, so weekend
    exclusions are honoured everywhere an event is listed.
    """

    def __init__(self, events):
        """Initialize with a snapshot of events.

        Args:
            events: Events to query (personal, contact or holiday).
        """
        self.events = list(events)

    def on_date(self, target: date | str) -> list:
        """Get events occurring on a specific date, in snapshot order.

        Args:
            target: The date (or ISO string) to filter events for.
        """
        return occurrences_for_day(target, self.events)

    def upcoming(self, days: int = 7, ref_date: date | None = None) -> list[tuple]:
        """Get (day, events) pairs for the next N days, skipping empty days.

        Args:
            days: Number of days to look ahead (default: 7).
            ref_date: Reference date (defaults to today).
        """
        start = ref_date or date.today()
        result = []
        for offset in range(days):
            day = add_days(start, offset)
            day_events = self.on_date(day)
            if day_events:
                result.append((day, day_events))
        return result

    def in_month(self, year: int, month: int) -> list:
        """Events whose start or end date falls in the given month.

        Returns:
            Matching events sorted by start date.
        """
        matching = [
            e
            for e in self.events
            if (e.start_date.year == year and e.start_date.month == month)
            or (e.end_date.year == year and e.end_date.month == month)
        ]
        return self._sort_by_start(matching)

    def date_range(self, start: date | str, end: date | str) -> list:
        """Events active on at least one day of ``[start, end]``."""
        start = parse_iso_date(start)
        end = parse_iso_date(end)
        seen: dict[str, object] = {}
        day = start
        while day <= end:
            for event in self.on_date(day):
                seen.setdefault(event.id, event)
            day += timedelta(days=1)
        return self._sort_by_start(list(seen.values()))

    def personal(self) -> list[PersonalEvent]:
        return [e for e in self.events if isinstance(e, PersonalEvent)]

    def contacts(self) -> list[ContactEvent]:
        return [e for e in self.events if isinstance(e, ContactEvent)]

    def search(self, query: str) -> list:
        """Case-insensitive search in titles and descriptions."""
        query_lower = query.lower()
        matching = [
            e
            for e in self.events
            if query_lower in e.title.lower()
            or query_lower in (getattr(e, "description", None) or "").lower()
        ]
        return self._sort_by_start(matching)

    def _sort_by_start(self, events: list) -> list:
        """Sort events by start date, then title."""
        return sorted(events, key=lambda e: (e.start_date, e.title))
