"""Evaluate and dispatch advance notifications."""

import logging

import typer
from typing_extensions import Annotated

from smartcal.dates import add_days
from smartcal.holidays import holidays_for_year
from smartcal.models.notification import PermissionStatus
from smartcal.storage.settings_store import load_or_create
from smartcal_cli.context import get_context
from smartcal_cli.display import console

logger = logging.getLogger(__name__)


def notify_command() -> None:
    """Dispatch today's advance notification if one is due.

    Runs at most once per target date and advance setting; repeated runs on
    the same day are no-ops.
    """
    ctx = get_context()
    today = ctx.today()
    settings = load_or_create(ctx.settings_store, ctx.owner_id)
    target = add_days(today, settings.advance_days)

    request = ctx.notification_service.run(
        today,
        settings,
        ctx.event_store.list(ctx.owner_id),
        holidays_for_year(target.year),
    )
    if request is None:
        logger.info("No notification dispatched")
        if not ctx.quiet:
            console.print("[dim]No notification due[/dim]")


def permission_command(
    grant: Annotated[bool, typer.Option("--grant", help="Grant notification permission")] = False,
    deny: Annotated[bool, typer.Option("--deny", help="Deny notification permission")] = False,
) -> None:
    """Show or change the notification permission."""
    if grant and deny:
        logger.error("Use either --grant or --deny, not both")
        raise typer.Exit(1)

    sink = get_context().notification_sink
    if grant:
        status = sink.request_permission()
        if status != PermissionStatus.GRANTED:
            sink.set_permission(PermissionStatus.GRANTED)
    elif deny:
        sink.set_permission(PermissionStatus.DENIED)

    console.print(f"Notification permission: [bold]{sink.permission_status().value}[/bold]")
