"""CLI helpers shared by commands."""

import logging
from datetime import date

import typer

from smartcal.dates import parse_iso_date
from smartcal.exceptions import EventNotFoundError, InvalidDateError

logger = logging.getLogger(__name__)


def parse_date_option(value: str) -> date:
    """Parse a YYYY-MM-DD command-line value.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    try:
        return parse_iso_date(value)
    except InvalidDateError:
        raise typer.BadParameter(f"Invalid date format: {value}. Use YYYY-MM-DD.")


def require_event(store, event_id: str):
    """Load an event or exit with an error message."""
    try:
        return store.get(event_id)
    except EventNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)


def resolve_month(year: int | None, month: int | None, today: date) -> tuple[int, int]:
    """Default a (year, month) pair to the month containing today."""
    return (year or today.year, month or today.month)
