"""Occurrence resolution: which events are active on a calendar day.

Everything here is a pure function of its arguments. Results are
recomputed on every call; the event set may change between renders and
is small enough that recomputing is cheap.
"""

from datetime import date, timedelta
from typing import Iterable, Mapping

from typing_extensions import assert_never

from smartcal.dates import (
    SATURDAY,
    SUNDAY,
    add_days,
    format_iso_date,
    is_same_day,
    parse_iso_date,
    sunday_index,
)
from smartcal.exceptions import ValidationError
from smartcal.models.day import DayCell
from smartcal.models.event import ContactEvent, HolidayEvent, PersonalEvent
from smartcal.models.weather import WeatherInfo

GRID_DAYS = 42


def occurs_on(day: date | str, event) -> bool:
    """Return True if ``event`` is active on ``day``.

    Args:
        day: Calendar date or ISO date string.
        event: A personal, contact or holiday event.

    Raises:
        InvalidDateError: If ``day`` is a malformed date string.
    """
    day = parse_iso_date(day)

    if isinstance(event, PersonalEvent):
        if not (event.start_date <= day <= event.end_date):
            return False
        if event.is_range:
            weekday = sunday_index(day)
            if event.exclude_saturday and weekday == SATURDAY:
                return False
            if event.exclude_sunday and weekday == SUNDAY:
                return False
        return True
    elif isinstance(event, ContactEvent):
        return event.date == day
    elif isinstance(event, HolidayEvent):
        return event.date == day
    else:
        assert_never(event)


def occurrences_for_day(day: date | str, events: Iterable) -> list:
    """Filter ``events`` down to those active on ``day``, keeping order."""
    day = parse_iso_date(day)
    return [event for event in events if occurs_on(day, event)]


def holiday_on(day: date | str, holidays: Iterable[HolidayEvent]) -> HolidayEvent | None:
    """Return the first holiday on ``day``, or None."""
    day = parse_iso_date(day)
    for holiday in holidays:
        if holiday.date == day:
            return holiday
    return None


def grid_start(year: int, month: int) -> date:
    """The Sunday on or before the first of the month."""
    first = date(year, month, 1)
    return first - timedelta(days=sunday_index(first))


def month_occurrences(
    year: int,
    month: int,
    events: Iterable,
    holidays: Iterable[HolidayEvent],
    today: date | None = None,
    weather: Mapping[str, WeatherInfo] | None = None,
) -> list[DayCell]:
    """Build the fixed 6x7 grid for a month.

    The grid starts on the Sunday on or before the 1st and always holds 42
    cells, so trailing cells may belong to the next month.

    Args:
        year: Calendar year.
        month: Month number, 1-12.
        events: Events to resolve per cell.
        holidays: Holidays covering the grid (may span two years).
        today: Reference date for ``is_today``. Captured once from
            ``date.today()`` when not given.
        weather: Forecast keyed by ISO date string.

    Raises:
        ValidationError: If ``month`` is out of range.
    """
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month: {month}. Use 1-12.")

    today = today or date.today()
    events = list(events)
    holidays = list(holidays)
    weather = weather or {}

    start = grid_start(year, month)
    cells = []
    for offset in range(GRID_DAYS):
        day = add_days(start, offset)
        cells.append(
            DayCell(
                date=day,
                is_current_month=(day.year == year and day.month == month),
                is_today=is_same_day(day, today),
                holiday=holiday_on(day, holidays),
                events=occurrences_for_day(day, events),
                weather=weather.get(format_iso_date(day)),
            )
        )
    return cells

