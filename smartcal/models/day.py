"""Day cell model for the month grid."""

import datetime as dt

from pydantic import BaseModel, computed_field

from smartcal.dates import format_iso_date
from smartcal.models.event import CalendarEvent, HolidayEvent
from smartcal.models.weather import WeatherInfo


class DayCell(BaseModel):
    """One cell of the fixed 6x7 month grid."""

    date: dt.date
    is_current_month: bool
    is_today: bool
    holiday: HolidayEvent | None = None
    events: list[CalendarEvent] = []
    weather: WeatherInfo | None = None

    @computed_field
    @property
    def date_string(self) -> str:
        return format_iso_date(self.date)
