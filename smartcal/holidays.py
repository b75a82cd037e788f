"""Public holiday generation.

Solar-calendar holidays fall on the same date every year. Lunar holidays
(Seollal, Buddha's Birthday, Chuseok) and substitute holidays move, and
converting lunar dates is out of scope, so they are listed literally for
the years we know about.
"""

import logging
from datetime import date

from smartcal.dates import format_iso_date
from smartcal.models.event import HolidayEvent

logger = logging.getLogger(__name__)

# (month, day, title)
FIXED_SOLAR_HOLIDAYS = [
    (1, 1, "신정"),
    (3, 1, "삼일절"),
    (5, 5, "어린이날"),
    (6, 6, "현충일"),
    (8, 15, "광복절"),
    (10, 3, "개천절"),
    (10, 9, "한글날"),
    (12, 25, "크리스마스"),
]

# year -> [(ISO date, title)]
LUNAR_AND_SUBSTITUTE_HOLIDAYS = {
    2026: [
        ("2026-02-16", "설날 연휴"),
        ("2026-02-17", "설날"),
        ("2026-02-18", "설날 연휴"),
        ("2026-03-02", "대체공휴일(삼일절)"),
        ("2026-05-24", "부처님오신날"),
        ("2026-05-25", "대체공휴일(부처님오신날)"),
        ("2026-09-24", "추석 연휴"),
        ("2026-09-25", "추석"),
        ("2026-09-26", "추석 연휴"),
    ],
}


def holiday_id(day: date) -> str:
    """Deterministic holiday id: ``"h"`` followed by the ISO date."""
    return f"h{format_iso_date(day)}"


def _make_holiday(day: date, title: str) -> HolidayEvent:
    return HolidayEvent(id=holiday_id(day), title=title, date=day)


def holidays_for_year(year: int) -> list[HolidayEvent]:
    """Generate the holidays of a year, ordered by date.

    Regenerating is idempotent: ids depend only on the date.
    """
    holidays = [
        _make_holiday(date(year, month, day), title)
        for month, day, title in FIXED_SOLAR_HOLIDAYS
    ]
    for iso_date, title in LUNAR_AND_SUBSTITUTE_HOLIDAYS.get(year, []):
        holidays.append(_make_holiday(date.fromisoformat(iso_date), title))

    logger.debug(f"Generated {len(holidays)} holidays for {year}")
    return sorted(holidays, key=lambda h: h.date)


def holidays_for_range(start: date, end: date) -> list[HolidayEvent]:
    """Holidays of every year touched by ``[start, end]``, ordered by date.

    Only holidays inside the range are returned.
    """
    result = []
    for year in range(start.year, end.year + 1):
        result.extend(h for h in holidays_for_year(year) if start <= h.date <= end)
    return result
