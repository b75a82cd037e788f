"""Tests for event, settings and day models."""

from datetime import date
from typing import Optional

import pydantic
import pytest

from smartcal.exceptions import ValidationError
from smartcal.models import (
    ContactEvent,
    DayCell,
    EventPatch,
    HolidayEvent,
    PersonalEvent,
    apply_patch,
    parse_event,
    parse_events,
    parse_user_event,
)
from smartcal.models.event import CONTACT_COLOR, HOLIDAY_COLOR
from smartcal.models.settings import (
    DEFAULT_SETTINGS,
    NotificationSettings,
    ReplaceSettings,
    SetAdvanceDays,
    SetEnabled,
    SetNotifyHolidays,
    SetNotifyPersonal,
    apply_update,
    parse_settings_update,
)


def test_personal_event_defaults():
    """A new personal event gets an id and is not completed."""
    event = PersonalEvent(title="Gym", start_date="2026-03-03", end_date="2026-03-03")
    assert event.id
    assert event.kind == "personal"
    assert event.completed is False
    assert event.start_date == date(2026, 3, 3)


def test_personal_event_ids_are_unique():
    a = PersonalEvent(title="A", start_date="2026-03-03", end_date="2026-03-03")
    b = PersonalEvent(title="B", start_date="2026-03-03", end_date="2026-03-03")
    assert a.id != b.id


def test_personal_event_rejects_inverted_range():
    """end_date before start_date is invalid."""
    with pytest.raises(pydantic.ValidationError):
        PersonalEvent(title="Bad", start_date="2026-03-05", end_date="2026-03-04")


def test_personal_event_rejects_blank_title():
    with pytest.raises(pydantic.ValidationError):
        PersonalEvent(title="   ", start_date="2026-03-05", end_date="2026-03-05")


def test_personal_event_rejects_non_padded_dates():
    """Dates must be zero-padded ISO strings."""
    with pytest.raises(pydantic.ValidationError):
        PersonalEvent(title="Bad", start_date="2026-3-5", end_date="2026-03-05")


def test_single_day_event_drops_exclusion_flags():
    """Weekend exclusion only applies to ranges."""
    event = PersonalEvent(
        title="Saturday brunch",
        start_date="2026-09-26",
        end_date="2026-09-26",
        exclude_saturday=True,
        exclude_sunday=True,
    )
    assert event.is_range is False
    assert event.exclude_saturday is False
    assert event.exclude_sunday is False


def test_range_event_keeps_exclusion_flags(chuseok_trip):
    assert chuseok_trip.is_range is True
    assert chuseok_trip.exclude_saturday is True


def test_contact_event_is_single_day(call_mom):
    """Contacts have one date that serves as both start and end."""
    assert call_mom.color == CONTACT_COLOR
    assert call_mom.start_date == call_mom.end_date == date(2026, 2, 16)
    assert call_mom.is_range is False


def test_contact_document_ignores_end_date():
    """A stray end date on a contact document has no effect."""
    event = parse_user_event(
        {"kind": "contact", "title": "Call", "date": "2026-02-16", "end_date": "2026-02-20"}
    )
    assert isinstance(event, ContactEvent)
    assert event.end_date == date(2026, 2, 16)


def test_holiday_event_is_frozen():
    holiday = HolidayEvent(id="h2026-03-01", title="삼일절", date="2026-03-01")
    assert holiday.color == HOLIDAY_COLOR
    with pytest.raises(pydantic.ValidationError):
        holiday.title = "Other"


def test_parse_event_dispatches_on_kind():
    """The kind tag selects the variant."""
    personal = parse_event(
        {"kind": "personal", "title": "A", "start_date": "2026-01-02", "end_date": "2026-01-03"}
    )
    holiday = parse_event({"kind": "holiday", "id": "h2026-01-01", "title": "신정", "date": "2026-01-01"})
    assert isinstance(personal, PersonalEvent)
    assert isinstance(holiday, HolidayEvent)


def test_parse_event_unknown_kind():
    with pytest.raises(ValidationError):
        parse_event({"kind": "birthday", "title": "A", "date": "2026-01-01"})


def test_parse_user_event_rejects_holidays():
    """Holidays are generated, never user documents."""
    with pytest.raises(ValidationError):
        parse_user_event({"kind": "holiday", "id": "h2026-01-01", "title": "신정", "date": "2026-01-01"})


def test_parse_user_event_wraps_errors():
    """Pydantic errors surface as our ValidationError."""
    with pytest.raises(ValidationError):
        parse_user_event({"kind": "personal", "title": "A", "start_date": "2026-01-05"})


def test_apply_patch_revalidates(dentist):
    """Patches produce a new validated event."""
    updated = apply_patch(dentist, EventPatch(end_date="2026-02-18", exclude_sunday=True))
    assert updated.id == dentist.id
    assert updated.end_date == date(2026, 2, 18)
    assert updated.exclude_sunday is True
    assert dentist.end_date == date(2026, 2, 16)


def test_apply_patch_rejects_inverted_range(dentist):
    with pytest.raises(ValidationError):
        apply_patch(dentist, EventPatch(end_date="2026-02-01"))


def test_apply_patch_rejects_foreign_fields(dentist, call_mom):
    """Fields of another variant are rejected."""
    with pytest.raises(ValidationError):
        apply_patch(dentist, EventPatch(phone_number="010"))
    with pytest.raises(ValidationError):
        apply_patch(call_mom, EventPatch(end_date="2026-02-20"))


def test_apply_patch_moves_contact(call_mom):
    """A contact can be rescheduled through its single date."""
    assert EventPatch.model_fields["date"].annotation == Optional[date]

    moved = apply_patch(call_mom, EventPatch(date="2026-03-05"))
    assert moved.date == date(2026, 3, 5)
    assert moved.start_date == moved.end_date == date(2026, 3, 5)
    assert moved.id == call_mom.id


def test_apply_patch_rejects_holidays():
    holiday = HolidayEvent(id="h2026-03-01", title="삼일절", date="2026-03-01")
    with pytest.raises(ValidationError):
        apply_patch(holiday, EventPatch(title="Other"))


def test_event_patch_forbids_unknown_fields():
    with pytest.raises(pydantic.ValidationError):
        EventPatch(owner_id="someone-else")


def test_day_cell_date_string():
    """The computed date_string appears in JSON dumps."""
    cell = DayCell(date=date(2026, 2, 1), is_current_month=True, is_today=False)
    assert cell.date_string == "2026-02-01"
    assert cell.model_dump(mode="json")["date_string"] == "2026-02-01"


def test_default_settings():
    assert DEFAULT_SETTINGS == NotificationSettings(
        advance_days=1, notify_holidays=True, notify_personal=True, enabled=True
    )


def test_parse_settings_update_by_field():
    """The field tag selects a typed update."""
    assert isinstance(parse_settings_update({"field": "advance_days", "value": 3}), SetAdvanceDays)
    assert isinstance(parse_settings_update({"field": "enabled", "value": False}), SetEnabled)
    assert isinstance(
        parse_settings_update({"field": "all", "value": {"advance_days": 0}}), ReplaceSettings
    )


@pytest.mark.parametrize(
    "data",
    [
        {"field": "advance_days", "value": -1},
        {"field": "volume", "value": 3},
        {"field": "advance_days"},
    ],
)
def test_parse_settings_update_rejects_invalid(data):
    with pytest.raises(ValidationError):
        parse_settings_update(data)


def test_apply_update_changes_one_field():
    settings = apply_update(DEFAULT_SETTINGS, SetNotifyHolidays(value=False))
    assert settings.notify_holidays is False
    assert settings.advance_days == DEFAULT_SETTINGS.advance_days
    assert DEFAULT_SETTINGS.notify_holidays is True


def test_apply_update_replaces_all():
    replacement = NotificationSettings(advance_days=7, enabled=False)
    assert apply_update(DEFAULT_SETTINGS, ReplaceSettings(value=replacement)) == replacement


def test_parse_events_mixed_documents():
    events = parse_events(
        [
            {"kind": "contact", "title": "Call", "date": "2026-02-16"},
            {"kind": "holiday", "id": "h2026-01-01", "title": "신정", "date": "2026-01-01"},
        ]
    )
    assert [e.kind for e in events] == ["contact", "holiday"]


def test_set_notify_personal():
    settings = apply_update(DEFAULT_SETTINGS, SetNotifyPersonal(value=False))
    assert settings.notify_personal is False
