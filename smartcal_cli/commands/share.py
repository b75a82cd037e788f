"""Print share text for an event or a day."""

import logging

import typer
from typing_extensions import Annotated

from smartcal.holidays import holidays_for_year
from smartcal.models.event import HolidayEvent
from smartcal.occurrence import holiday_on, occurrences_for_day
from smartcal.share import day_share_text, event_share_text
from smartcal_cli.context import get_context
from smartcal_cli.utils import parse_date_option, require_event

logger = logging.getLogger(__name__)


def share_command(
    event_id: Annotated[str | None, typer.Option("--event", "-e", help="Event id")] = None,
    day: Annotated[str | None, typer.Option("--day", "-d", help="Date (YYYY-MM-DD)")] = None,
    weather: Annotated[
        bool, typer.Option("--weather", "-w", help="Include the forecast (--day only)")
    ] = False,
) -> None:
    """Print a share message for one event or one day."""
    if (event_id is None) == (day is None):
        logger.error("Give exactly one of --event or --day")
        raise typer.Exit(1)

    ctx = get_context()
    if event_id is not None:
        event = require_event(ctx.event_store, event_id)
        if isinstance(event, HolidayEvent):
            logger.error("Holidays cannot be shared as events")
            raise typer.Exit(1)
        print(event_share_text(event))
        return

    target = parse_date_option(day)
    events = occurrences_for_day(target, ctx.event_store.list(ctx.owner_id))
    holiday = holiday_on(target, holidays_for_year(target.year))
    info = ctx.forecast().get(target.isoformat()) if weather else None
    print(day_share_text(target, events, holiday=holiday, weather=info))
