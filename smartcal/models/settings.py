"""Per-user notification settings and their typed update operations."""

from typing import Annotated, Literal, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from smartcal.exceptions import ValidationError

# Lead times offered by the settings screen: (days, label)
ADVANCE_DAY_OPTIONS = [
    (0, "당일"),
    (1, "1일 전"),
    (3, "3일 전"),
    (7, "7일 전"),
]


class NotificationSettings(BaseModel):
    """Notification preferences for one user.

    Created with defaults on first access, persisted per owner and
    read-modify-written on every change.
    """

    model_config = ConfigDict(frozen=True)

    advance_days: int = Field(default=1, ge=0)
    notify_holidays: bool = True
    notify_personal: bool = True
    enabled: bool = True


DEFAULT_SETTINGS = NotificationSettings()


class SetAdvanceDays(BaseModel):
    field: Literal["advance_days"] = "advance_days"
    value: int = Field(ge=0)


class SetNotifyHolidays(BaseModel):
    field: Literal["notify_holidays"] = "notify_holidays"
    value: bool


class SetNotifyPersonal(BaseModel):
    field: Literal["notify_personal"] = "notify_personal"
    value: bool


class SetEnabled(BaseModel):
    field: Literal["enabled"] = "enabled"
    value: bool


class ReplaceSettings(BaseModel):
    field: Literal["all"] = "all"
    value: NotificationSettings


SettingsUpdate = Annotated[
    Union[SetAdvanceDays, SetNotifyHolidays, SetNotifyPersonal, SetEnabled, ReplaceSettings],
    Field(discriminator="field"),
]

_settings_update_adapter: pydantic.TypeAdapter = pydantic.TypeAdapter(SettingsUpdate)


def parse_settings_update(data: dict):
    """Validate a raw ``{"field": ..., "value": ...}`` document.

    Raises:
        ValidationError: If the field is unknown or the value is invalid.
    """
    try:
        return _settings_update_adapter.validate_python(data)
    except pydantic.ValidationError as e:
        raise ValidationError(str(e)) from e


def apply_update(
    settings: NotificationSettings, update: SettingsUpdate
) -> NotificationSettings:
    """Return new settings with ``update`` applied."""
    if isinstance(update, ReplaceSettings):
        return update.value
    data = settings.model_dump()
    data[update.field] = update.value
    try:
        return NotificationSettings.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(str(e)) from e
