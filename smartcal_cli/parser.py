"""CLI app definition and command routing."""

import logging
import sys

import typer
from typing_extensions import Annotated

from smartcal.config import AppConfig
from smartcal.exceptions import CalendarError
from smartcal_cli import setup_logging
from smartcal_cli.commands import (
    add_command,
    chat_command,
    complete_command,
    day_command,
    delete_command,
    edit_command,
    export_command,
    holidays_command,
    month_command,
    notify_command,
    permission_command,
    search_command,
    settings_app,
    share_command,
    summary_command,
    theme_command,
    upcoming_command,
    weather_command,
)
from smartcal_cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="smartcal",
    help="Smart calendar: month view, events, holidays and reminders.",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Configure logging and the shared context before any command runs."""
    config = AppConfig.from_env()
    setup_logging(verbose=verbose, quiet=quiet, config=config)
    set_context(CLIContext(verbose=verbose, quiet=quiet, config=config))


# Calendar views
app.command("month")(month_command)
app.command("day")(day_command)
app.command("upcoming")(upcoming_command)
app.command("holidays")(holidays_command)
app.command("weather")(weather_command)

# Event management
app.command("add")(add_command)
app.command("edit")(edit_command)
app.command("complete")(complete_command)
app.command("delete")(delete_command)
app.command("search")(search_command)

# Notifications
app.add_typer(settings_app, name="settings")
app.command("notify")(notify_command)
app.command("permission")(permission_command)

# Summary, assistant and sharing
app.command("summary")(summary_command)
app.command("chat")(chat_command)
app.command("share")(share_command)
app.command("export")(export_command)
app.command("theme")(theme_command)


def main() -> None:
    """Run the CLI, turning calendar errors into exit code 1."""
    try:
        app()
    except CalendarError as e:
        logger.error(str(e))
        sys.exit(1)
