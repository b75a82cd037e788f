"""Search events by text, kind, or date range."""

import logging

import typer
from typing_extensions import Annotated

from smartcal.calendar_query import EventQuery
from smartcal_cli.context import get_context
from smartcal_cli.display import RichEventRenderer
from smartcal_cli.utils import parse_date_option

logger = logging.getLogger(__name__)

KINDS = ("personal", "contact")


def search_command(
    query: Annotated[
        str | None,
        typer.Argument(help="Text to search for in titles and descriptions"),
    ] = None,
    kind: Annotated[
        str | None,
        typer.Option("--kind", "-k", help="Filter by kind (personal or contact)"),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--from", help="Only events active on or after this date"),
    ] = None,
    end: Annotated[
        str | None,
        typer.Option("--to", help="Only events active on or before this date"),
    ] = None,
) -> None:
    """Search events.

    Examples:
        smartcal search dentist                  # "dentist" in title or description
        smartcal search --kind contact           # All contacts
        smartcal search trip --from 2026-09-01 --to 2026-09-30
    """
    if not any([query, kind, start, end]):
        logger.error("Please provide a search query, --kind, --from or --to")
        raise typer.Exit(1)
    if kind is not None and kind not in KINDS:
        logger.error(f"Unknown kind '{kind}'. Use one of: {', '.join(KINDS)}")
        raise typer.Exit(1)

    ctx = get_context()
    cal_query = EventQuery(ctx.event_store.list(ctx.owner_id))

    if start or end:
        # Open-ended ranges are bounded by the stored events
        events = cal_query.events
        first = parse_date_option(start) if start else min((e.start_date for e in events), default=None)
        last = parse_date_option(end) if end else max((e.end_date for e in events), default=None)
        if first is not None and last is not None and first > last:
            logger.error("--from must not be after --to")
            raise typer.Exit(1)
        if first is None or last is None:
            cal_query = EventQuery([])
        else:
            cal_query = EventQuery(cal_query.date_range(first, last))

    if kind == "personal":
        cal_query = EventQuery(cal_query.personal())
    elif kind == "contact":
        cal_query = EventQuery(cal_query.contacts())

    events = cal_query.search(query or "")

    criteria = []
    if query:
        criteria.append(f'"{query}"')
    if kind:
        criteria.append(f"kind: {kind}")
    if start or end:
        criteria.append(f"{start or '…'} ~ {end or '…'}")
    subtitle = " ".join(criteria)

    renderer = RichEventRenderer()
    if events:
        renderer.render_list(events, title="Search", subtitle=subtitle)
    else:
        renderer.render_empty(f"No events matching: {subtitle}")
