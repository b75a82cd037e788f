"""Show and change notification settings."""

import json
import logging

import typer
from rich.table import Table
from typing_extensions import Annotated

from smartcal.exceptions import ValidationError
from smartcal.models.settings import ADVANCE_DAY_OPTIONS, NotificationSettings, parse_settings_update
from smartcal.storage.settings_store import load_or_create, update_settings
from smartcal_cli.context import get_context
from smartcal_cli.display import console

logger = logging.getLogger(__name__)

settings_app = typer.Typer(help="Notification settings", no_args_is_help=True)

SETTING_FIELDS = ["advance_days", "notify_holidays", "notify_personal", "enabled", "all"]


def _advance_label(days: int) -> str:
    for value, label in ADVANCE_DAY_OPTIONS:
        if value == days:
            return label
    return f"{days}일 전"


def _render(settings: NotificationSettings, owner_id: str) -> None:
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", no_wrap=True)
    table.add_column("VALUE")
    table.add_row("owner", f"[dim]{owner_id}[/dim]")
    table.add_row("enabled", str(settings.enabled))
    table.add_row("advance_days", f"{settings.advance_days} ({_advance_label(settings.advance_days)})")
    table.add_row("notify_personal", str(settings.notify_personal))
    table.add_row("notify_holidays", str(settings.notify_holidays))
    console.print(table)


@settings_app.command("show")
def show() -> None:
    """Display the current notification settings."""
    ctx = get_context()
    _render(load_or_create(ctx.settings_store, ctx.owner_id), ctx.owner_id)


@settings_app.command("set")
def set_(
    field: Annotated[str, typer.Argument(help=f"One of: {', '.join(SETTING_FIELDS)}")],
    value: Annotated[str, typer.Argument(help="New value (JSON object for 'all')")],
) -> None:
    """Change one setting.

    Examples:
        smartcal settings set advance_days 3
        smartcal settings set notify_holidays false
        smartcal settings set all '{"advance_days": 0, "enabled": true}'
    """
    ctx = get_context()
    raw: object = value
    if field == "all":
        try:
            raw = json.loads(value)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON for 'all': {e}")
            raise typer.Exit(1)

    try:
        update = parse_settings_update({"field": field, "value": raw})
        settings = update_settings(ctx.settings_store, ctx.owner_id, update)
    except ValidationError as e:
        logger.error(f"Invalid setting: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Updated {field}")
    _render(settings, ctx.owner_id)
