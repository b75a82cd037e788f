"""Event models with Pydantic v2 validation.

Events are a tagged union over ``kind``:

- ``PersonalEvent``: a date range with optional weekend exclusion and a
  completion flag.
- ``ContactEvent``: a single day with a phone number. It has no end date.
- ``HolidayEvent``: a generated, immutable single day. Never persisted.
"""

import datetime as dt
import uuid
from typing import Annotated, Literal, Optional, Union

import pydantic
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from smartcal.dates import parse_iso_date
from smartcal.exceptions import ValidationError

HOLIDAY_COLOR = "red"
CONTACT_COLOR = "emerald"

# Presentational color tags offered for personal events
EVENT_COLORS = [
    "red",
    "rose",
    "pink",
    "fuchsia",
    "purple",
    "violet",
    "indigo",
    "blue",
    "sky",
    "cyan",
    "teal",
    "emerald",
    "green",
    "lime",
    "yellow",
    "amber",
    "orange",
    "gray",
]


def new_event_id() -> str:
    """Generate an opaque unique event id."""
    return uuid.uuid4().hex


def _strict_date(value):
    return parse_iso_date(value)


def _non_blank(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("title must not be empty")
    return value


class PersonalEvent(BaseModel):
    """A user event spanning one or more consecutive days."""

    kind: Literal["personal"] = "personal"
    id: str = Field(default_factory=new_event_id)
    owner_id: str | None = None
    title: str
    description: str | None = None
    color: str | None = None
    start_date: dt.date
    end_date: dt.date
    completed: bool = False
    exclude_saturday: bool = False
    exclude_sunday: bool = False

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def check_dates(cls, v):
        return _strict_date(v)

    @field_validator("title")
    @classmethod
    def check_title(cls, v):
        return _non_blank(v)

    @model_validator(mode="after")
    def validate_range(self):
        """Reject inverted ranges; weekend exclusion only applies to ranges."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must be >= start_date")
        if self.start_date == self.end_date:
            self.exclude_saturday = False
            self.exclude_sunday = False
        return self

    @property
    def is_range(self) -> bool:
        return self.start_date != self.end_date


class ContactEvent(BaseModel):
    """A single-day contact reminder (e.g. a call to make)."""

    kind: Literal["contact"] = "contact"
    id: str = Field(default_factory=new_event_id)
    owner_id: str | None = None
    title: str
    description: str | None = None
    color: str | None = CONTACT_COLOR
    phone_number: str | None = None
    date: dt.date

    @field_validator("date", mode="before")
    @classmethod
    def check_date(cls, v):
        return _strict_date(v)

    @field_validator("title")
    @classmethod
    def check_title(cls, v):
        return _non_blank(v)

    @property
    def start_date(self) -> dt.date:
        return self.date

    @property
    def end_date(self) -> dt.date:
        return self.date

    @property
    def is_range(self) -> bool:
        return False


class HolidayEvent(BaseModel):
    """A public holiday generated for a given year."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["holiday"] = "holiday"
    id: str
    title: str
    color: str = HOLIDAY_COLOR
    date: dt.date

    @field_validator("date", mode="before")
    @classmethod
    def check_date(cls, v):
        return _strict_date(v)

    @property
    def start_date(self) -> dt.date:
        return self.date

    @property
    def end_date(self) -> dt.date:
        return self.date

    @property
    def is_range(self) -> bool:
        return False


CalendarEvent = Annotated[
    Union[PersonalEvent, ContactEvent, HolidayEvent], Field(discriminator="kind")
]
UserEvent = Annotated[Union[PersonalEvent, ContactEvent], Field(discriminator="kind")]

_calendar_event_adapter: TypeAdapter = TypeAdapter(CalendarEvent)
_user_event_adapter: TypeAdapter = TypeAdapter(UserEvent)


def parse_event(data: dict) -> Union[PersonalEvent, ContactEvent, HolidayEvent]:
    """Validate a raw document into the matching event variant.

    Raises:
        ValidationError: If the document is not a valid event.
    """
    try:
        return _calendar_event_adapter.validate_python(data)
    except pydantic.ValidationError as e:
        raise ValidationError(str(e)) from e


def parse_user_event(data: dict) -> Union[PersonalEvent, ContactEvent]:
    """Validate a raw document into a personal or contact event.

    Raises:
        ValidationError: If the document is not a valid user event
            (holidays are rejected).
    """
    try:
        return _user_event_adapter.validate_python(data)
    except pydantic.ValidationError as e:
        raise ValidationError(str(e)) from e


def parse_events(items: list[dict]) -> list:
    """Validate a list of raw documents."""
    return [parse_event(item) for item in items]


class EventPatch(BaseModel):
    """Typed partial update for a personal or contact event.

    Only fields that were explicitly set are applied. Fields that the
    target variant does not have are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    color: str | None = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    completed: bool | None = None
    exclude_saturday: bool | None = None
    exclude_sunday: bool | None = None
    phone_number: str | None = None
    date: Optional[dt.date] = None

    @field_validator("start_date", "end_date", "date", mode="before")
    @classmethod
    def check_dates(cls, v):
        return None if v is None else _strict_date(v)


def apply_patch(
    event: Union[PersonalEvent, ContactEvent], patch: EventPatch
) -> Union[PersonalEvent, ContactEvent]:
    """Return a re-validated copy of ``event`` with ``patch`` applied.

    Raises:
        ValidationError: If the event is a holiday, the patch names a field
            the variant does not have, or the result is invalid.
    """
    if isinstance(event, HolidayEvent):
        raise ValidationError("Holidays cannot be edited")

    changes = patch.model_dump(exclude_unset=True)
    allowed = set(type(event).model_fields) - {"kind", "id", "owner_id"}
    unknown = sorted(set(changes) - allowed)
    if unknown:
        raise ValidationError(
            f"{event.kind} events have no field(s): {', '.join(unknown)}"
        )

    data = event.model_dump()
    data.update(changes)
    return parse_user_event(data)
