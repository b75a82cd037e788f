"""Notification sinks."""

import logging
from typing import Protocol

from rich.console import Console
from rich.panel import Panel

from smartcal.models.notification import PermissionStatus
from smartcal.storage.kv_store import LocalKeyValueStore

logger = logging.getLogger(__name__)

PERMISSION_KEY = "notification_permission"


class NotificationSink(Protocol):
    """Protocol for platform notification sinks."""

    def permission_status(self) -> PermissionStatus:
        ...

    def request_permission(self) -> PermissionStatus:
        ...

    def dispatch(self, title: str, body: str) -> bool:
        """Emit a notification; return True once it was delivered."""
        ...


class ConsoleNotificationSink:
    """Render notifications as Rich panels in the terminal.

    The permission lives in local state, so a user who denied
    notifications stays opted out across runs.
    """

    def __init__(self, kv: LocalKeyValueStore, console: Console | None = None):
        self.kv = kv
        self.console = console or Console()

    def permission_status(self) -> PermissionStatus:
        value = self.kv.get(PERMISSION_KEY, PermissionStatus.DEFAULT.value)
        try:
            return PermissionStatus(value)
        except ValueError:
            logger.warning(f"Ignoring unknown notification permission: {value}")
            return PermissionStatus.DEFAULT

    def request_permission(self) -> PermissionStatus:
        """Grant permission unless the user denied it before."""
        status = self.permission_status()
        if status == PermissionStatus.DEFAULT:
            status = PermissionStatus.GRANTED
            self.set_permission(status)
        return status

    def set_permission(self, status: PermissionStatus) -> None:
        self.kv.set(PERMISSION_KEY, status.value)

    def dispatch(self, title: str, body: str) -> bool:
        self.console.print(Panel(body, title=f"🔔 {title}", expand=False))
        return True
