"""CLI commands package."""

from smartcal_cli.commands.calendar import (
    day_command,
    holidays_command,
    month_command,
    upcoming_command,
    weather_command,
)
from smartcal_cli.commands.events import add_command, complete_command, delete_command, edit_command
from smartcal_cli.commands.export import export_command
from smartcal_cli.commands.notify import notify_command, permission_command
from smartcal_cli.commands.search import search_command
from smartcal_cli.commands.settings import settings_app
from smartcal_cli.commands.share import share_command
from smartcal_cli.commands.summary import chat_command, summary_command
from smartcal_cli.commands.theme import theme_command

__all__ = [
    "add_command",
    "chat_command",
    "complete_command",
    "day_command",
    "delete_command",
    "edit_command",
    "export_command",
    "holidays_command",
    "month_command",
    "notify_command",
    "permission_command",
    "search_command",
    "settings_app",
    "share_command",
    "summary_command",
    "theme_command",
    "upcoming_command",
    "weather_command",
]
