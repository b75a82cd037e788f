"""Create, edit, complete and delete events."""

import logging

import pydantic
import typer
from typing_extensions import Annotated

from smartcal.exceptions import EventNotFoundError, ValidationError
from smartcal.models.event import EVENT_COLORS, EventPatch, PersonalEvent, parse_user_event
from smartcal_cli.context import get_context
from smartcal_cli.display import console, format_period
from smartcal_cli.utils import parse_date_option, require_event

logger = logging.getLogger(__name__)


def add_command(
    title: Annotated[str, typer.Argument(help="Event title")],
    start: Annotated[str, typer.Option("--start", "-s", help="Start date (YYYY-MM-DD)")],
    end: Annotated[
        str | None, typer.Option("--end", "-e", help="End date (YYYY-MM-DD), defaults to start")
    ] = None,
    contact: Annotated[
        bool, typer.Option("--contact", help="Create a contact reminder instead of an event")
    ] = False,
    phone: Annotated[str | None, typer.Option("--phone", help="Phone number (contacts)")] = None,
    description: Annotated[str | None, typer.Option("--description", "-d")] = None,
    color: Annotated[str | None, typer.Option("--color", "-c", help="Color tag")] = None,
    exclude_saturday: Annotated[
        bool, typer.Option("--exclude-sat", help="Skip Saturdays inside the range")
    ] = False,
    exclude_sunday: Annotated[
        bool, typer.Option("--exclude-sun", help="Skip Sundays inside the range")
    ] = False,
) -> None:
    """Add a personal event or a contact reminder.

    Examples:
        smartcal add "Team offsite" --start 2026-09-24 --end 2026-09-26 --exclude-sat
        smartcal add "Call mom" --start 2026-02-16 --contact --phone 010-1234-5678
    """
    ctx = get_context()
    start_date = parse_date_option(start)

    if color is not None and color not in EVENT_COLORS:
        logger.warning(f"Unknown color tag '{color}'")

    if contact:
        data = {
            "kind": "contact",
            "title": title,
            "date": start_date,
            "phone_number": phone,
            "description": description,
        }
        if color is not None:
            data["color"] = color
    else:
        data = {
            "kind": "personal",
            "title": title,
            "start_date": start_date,
            "end_date": parse_date_option(end) if end else start_date,
            "description": description,
            "color": color,
            "exclude_saturday": exclude_saturday,
            "exclude_sunday": exclude_sunday,
        }
    data["owner_id"] = ctx.owner_id

    try:
        event = ctx.event_store.create(parse_user_event(data))
    except ValidationError as e:
        logger.error(f"Invalid event: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Added {event.title} [dim]{format_period(event)}[/dim]")
    console.print(f"  [dim]{event.id}[/dim]")


def edit_command(
    event_id: Annotated[str, typer.Argument(help="Event id")],
    title: Annotated[str | None, typer.Option("--title", "-t")] = None,
    start: Annotated[str | None, typer.Option("--start", "-s", help="Start date (personal)")] = None,
    end: Annotated[str | None, typer.Option("--end", "-e", help="End date (personal)")] = None,
    on: Annotated[str | None, typer.Option("--date", help="Date (contacts)")] = None,
    phone: Annotated[str | None, typer.Option("--phone", help="Phone number (contacts)")] = None,
    description: Annotated[str | None, typer.Option("--description", "-d")] = None,
    color: Annotated[str | None, typer.Option("--color", "-c")] = None,
    exclude_saturday: Annotated[
        bool | None, typer.Option("--exclude-sat/--include-sat", help="Saturday exclusion")
    ] = None,
    exclude_sunday: Annotated[
        bool | None, typer.Option("--exclude-sun/--include-sun", help="Sunday exclusion")
    ] = None,
) -> None:
    """Edit fields of an existing event."""
    ctx = get_context()
    require_event(ctx.event_store, event_id)

    changes = {
        "title": title,
        "start_date": parse_date_option(start) if start else None,
        "end_date": parse_date_option(end) if end else None,
        "date": parse_date_option(on) if on else None,
        "phone_number": phone,
        "description": description,
        "color": color,
        "exclude_saturday": exclude_saturday,
        "exclude_sunday": exclude_sunday,
    }
    changes = {k: v for k, v in changes.items() if v is not None}
    if not changes:
        logger.warning("Nothing to change")
        return

    try:
        patch = EventPatch(**changes)
        event = ctx.event_store.update(event_id, patch)
    except (pydantic.ValidationError, ValidationError) as e:
        logger.error(f"Invalid change: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Updated {event.title} [dim]{format_period(event)}[/dim]")


def complete_command(
    event_id: Annotated[str, typer.Argument(help="Event id")],
    undo: Annotated[bool, typer.Option("--undo", help="Mark as not completed")] = False,
) -> None:
    """Mark a personal event as completed."""
    ctx = get_context()
    event = require_event(ctx.event_store, event_id)
    if not isinstance(event, PersonalEvent):
        logger.error(f"Only personal events can be completed ({event.kind})")
        raise typer.Exit(1)

    event = ctx.event_store.update(event_id, EventPatch(completed=not undo))
    state = "completed" if event.completed else "not completed"
    console.print(f"[green]✓[/green] {event.title}: {state}")


def delete_command(
    event_id: Annotated[str, typer.Argument(help="Event id")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation prompt")] = False,
) -> None:
    """Delete an event."""
    ctx = get_context()
    event = require_event(ctx.event_store, event_id)

    if not force:
        confirm = typer.confirm(f"Delete '{event.title}'?")
        if not confirm:
            console.print("Cancelled.")
            raise typer.Exit(0)

    try:
        ctx.event_store.delete(event_id)
    except EventNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] Deleted {event.title}")
