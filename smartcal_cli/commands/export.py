"""Export events to ICS format."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from smartcal.exceptions import ExportError
from smartcal.export import ICSExporter
from smartcal.holidays import holidays_for_year
from smartcal_cli.context import get_context

logger = logging.getLogger(__name__)


def export_command(
    output: Annotated[Path, typer.Argument(help="Output .ics path")],
    name: Annotated[str, typer.Option("--name", "-n", help="Calendar name")] = "SmartCal",
    holidays: Annotated[
        list[int] | None,
        typer.Option("--holidays", help="Include public holidays for YEAR (repeatable)"),
    ] = None,
) -> None:
    """
    Export events to an ICS file.

    Ranged events with weekend exclusions are written as one entry per
    run of consecutive days, so other calendar apps show the same days.
    """
    ctx = get_context()
    events = list(ctx.event_store.list(ctx.owner_id))
    for year in holidays or []:
        events.extend(holidays_for_year(year))

    try:
        path = ICSExporter().write(events, output, name=name)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        raise typer.Exit(1)

    print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Exported ICS")
    print(f"  {path.resolve()}")
