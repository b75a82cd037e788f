"""Local calendar-date helpers.

All dates in the application are local calendar dates written as
zero-padded ISO strings (YYYY-MM-DD); there is no time of day and no
timezone offset.
"""

import calendar
import re
from datetime import date, datetime, timedelta

from smartcal.exceptions import InvalidDateError

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Weekday indexes with Sunday first, as shown in the month grid
SUNDAY = 0
SATURDAY = 6


def parse_iso_date(value: str | date) -> date:
    """Parse a strict YYYY-MM-DD string into a date.

    Args:
        value: ISO date string, or a date which is returned unchanged.

    Returns:
        Parsed date.

    Raises:
        InvalidDateError: If the value is not a zero-padded ISO calendar date.
    """
    if isinstance(value, datetime):
        raise InvalidDateError(f"Expected a calendar date, got datetime: {value!r}")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_RE.match(value):
        raise InvalidDateError(f"Invalid date: {value!r}. Use YYYY-MM-DD.")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidDateError(f"Invalid date: {value!r}. Use YYYY-MM-DD.")


def format_iso_date(d: date) -> str:
    return d.strftime("%Y-%m-%d")


def add_days(d: date, days: int) -> date:
    """Add whole calendar days, rolling over month and year boundaries."""
    return d + timedelta(days=days)


def sunday_index(d: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (d.weekday() + 1) % 7


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def is_same_day(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month and a.day == b.day
