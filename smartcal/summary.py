"""Monthly summary statistics."""

from pydantic import BaseModel

from smartcal.calendar_query import EventQuery
from smartcal.models.event import CalendarEvent


class MonthlySummary(BaseModel):
    """Events of a month with completion statistics."""

    year: int
    month: int
    events: list[CalendarEvent]
    total: int
    completed: int
    pending: int
    completion_rate: int


def monthly_summary(events, year: int, month: int) -> MonthlySummary:
    """Summarize events whose start or end date falls in the month.

    ``completion_rate`` is a rounded percentage, 0 for an empty month.
    """
    monthly = EventQuery(events).in_month(year, month)
    total = len(monthly)
    completed = sum(1 for e in monthly if getattr(e, "completed", False))
    rate = round(completed / total * 100) if total else 0
    return MonthlySummary(
        year=year,
        month=month,
        events=monthly,
        total=total,
        completed=completed,
        pending=total - completed,
        completion_rate=rate,
    )


def format_event_line(event) -> str:
    """One line of an event listing: ``- start[ ~ end]: title (status)``."""
    period = event.start_date.isoformat()
    if event.start_date != event.end_date:
        period += f" ~ {event.end_date.isoformat()}"
    status = "완료" if getattr(event, "completed", False) else "진행중"
    return f"- {period}: {event.title} ({status})"
