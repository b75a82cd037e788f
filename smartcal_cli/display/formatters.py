"""Pure formatting functions for display output."""

from datetime import date

from smartcal.share import WEEKDAYS
from smartcal.dates import sunday_index


def format_day_label(day: date, today: date) -> str:
    """Relative label for an agenda day header.

    Returns:
        "TODAY", "Tomorrow", or e.g. "2026-02-16 (월)".
    """
    delta = (day - today).days
    if delta == 0:
        return f"TODAY {day.isoformat()} ({WEEKDAYS[sunday_index(day)]})"
    if delta == 1:
        return f"Tomorrow {day.isoformat()} ({WEEKDAYS[sunday_index(day)]})"
    return f"{day.isoformat()} ({WEEKDAYS[sunday_index(day)]})"


def format_period(event) -> str:
    """``start`` or ``start ~ end`` for an event."""
    if event.start_date == event.end_date:
        return event.start_date.isoformat()
    return f"{event.start_date.isoformat()} ~ {event.end_date.isoformat()}"


def format_temp(value: float) -> str:
    return f"{round(value)}°"
