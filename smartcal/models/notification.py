"""Notification request and permission models."""

from datetime import date
from enum import Enum

from pydantic import BaseModel


class PermissionStatus(str, Enum):
    """Platform notification permission."""

    GRANTED = "granted"
    DENIED = "denied"
    DEFAULT = "default"


class NotificationRequest(BaseModel):
    """A notification the caller should emit.

    The caller marks ``dedup_key`` as recorded only after the
    notification was emitted successfully.
    """

    title: str
    body: str
    dedup_key: str
    target_date: date
    advance_days: int
