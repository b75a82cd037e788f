"""Pydantic models for the calendar."""

from smartcal.models.day import DayCell
from smartcal.models.event import (
    CalendarEvent,
    ContactEvent,
    EventPatch,
    HolidayEvent,
    PersonalEvent,
    UserEvent,
    apply_patch,
    new_event_id,
    parse_event,
    parse_events,
    parse_user_event,
)
from smartcal.models.notification import NotificationRequest, PermissionStatus
from smartcal.models.settings import (
    ADVANCE_DAY_OPTIONS,
    DEFAULT_SETTINGS,
    NotificationSettings,
    ReplaceSettings,
    SetAdvanceDays,
    SetEnabled,
    SetNotifyHolidays,
    SetNotifyPersonal,
    SettingsUpdate,
    apply_update,
    parse_settings_update,
)
from smartcal.models.weather import WeatherInfo

__all__ = [
    "CalendarEvent",
    "ContactEvent",
    "DayCell",
    "EventPatch",
    "HolidayEvent",
    "PersonalEvent",
    "UserEvent",
    "apply_patch",
    "new_event_id",
    "parse_event",
    "parse_events",
    "parse_user_event",
    "NotificationRequest",
    "PermissionStatus",
    "ADVANCE_DAY_OPTIONS",
    "DEFAULT_SETTINGS",
    "NotificationSettings",
    "ReplaceSettings",
    "SetAdvanceDays",
    "SetEnabled",
    "SetNotifyHolidays",
    "SetNotifyPersonal",
    "SettingsUpdate",
    "apply_update",
    "parse_settings_update",
    "WeatherInfo",
]
