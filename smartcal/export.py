"""ICS export of calendar events."""

import logging
from datetime import date, datetime, timedelta
from pathlib import Path

from icalendar import Calendar, Event

from smartcal.dates import add_days
from smartcal.exceptions import ExportError
from smartcal.models.event import ContactEvent, HolidayEvent, PersonalEvent
from smartcal.occurrence import occurs_on

logger = logging.getLogger(__name__)


def occurrence_runs(event: PersonalEvent) -> list[tuple[date, date]]:
    """Split an event into contiguous runs of days it occurs on.

    Weekend exclusions can break a range into several runs; each run is
    inclusive at both ends.
    """
    runs = []
    run_start = None
    day = event.start_date
    while day <= event.end_date:
        if occurs_on(day, event):
            if run_start is None:
                run_start = day
        elif run_start is not None:
            runs.append((run_start, add_days(day, -1)))
            run_start = None
        day = add_days(day, 1)
    if run_start is not None:
        runs.append((run_start, event.end_date))
    return runs


class ICSExporter:
    """Write events as all-day iCalendar entries."""

    def __init__(self, prodid: str = "-//SmartCal//EN"):
        self.prodid = prodid

    def _vevent(self, uid: str, title: str, start: date, end: date) -> Event:
        vevent = Event()
        vevent.add("uid", uid)
        vevent.add("summary", title)
        vevent.add("dtstamp", datetime.now())
        vevent.add("dtstart", start)
        # End date is exclusive in iCalendar, so add one day
        vevent.add("dtend", end + timedelta(days=1))
        return vevent

    def build(self, events, name: str = "SmartCal") -> Calendar:
        cal = Calendar()
        cal.add("prodid", self.prodid)
        cal.add("version", "2.0")
        cal.add("X-WR-CALNAME", name)

        for event in events:
            if isinstance(event, PersonalEvent):
                for index, (start, end) in enumerate(occurrence_runs(event)):
                    vevent = self._vevent(f"{event.id}-{index}@smartcal", event.title, start, end)
                    if event.description:
                        vevent.add("description", event.description)
                    cal.add_component(vevent)
            elif isinstance(event, ContactEvent):
                vevent = self._vevent(f"{event.id}@smartcal", event.title, event.date, event.date)
                details = [d for d in (event.phone_number, event.description) if d]
                if details:
                    vevent.add("description", "\n".join(details))
                cal.add_component(vevent)
            elif isinstance(event, HolidayEvent):
                vevent = self._vevent(f"{event.id}@smartcal", event.title, event.date, event.date)
                vevent.add("categories", ["HOLIDAY"])
                cal.add_component(vevent)
            else:
                raise ExportError(f"Cannot export event of type {type(event).__name__}")
        return cal

    def to_ical(self, events, name: str = "SmartCal") -> bytes:
        return self.build(events, name).to_ical()

    def write(self, events, path: Path, name: str = "SmartCal") -> Path:
        """Write events to an ICS file.

        Raises:
            ExportError: If the file cannot be written.
        """
        content = self.to_ical(events, name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise ExportError(f"Failed to write {path}: {e}") from e
        logger.info(f"Exported calendar to {path}")
        return path
