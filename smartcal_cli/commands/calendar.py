"""Month grid, day detail, holidays and weather views."""

import logging

import typer
from rich.table import Table
from typing_extensions import Annotated

from smartcal.calendar_query import EventQuery
from smartcal.dates import add_days
from smartcal.holidays import holidays_for_range, holidays_for_year
from smartcal.occurrence import grid_start, holiday_on, month_occurrences, occurrences_for_day
from smartcal.share import display_date
from smartcal_cli.context import get_context
from smartcal_cli.display import MonthRenderer, RichEventRenderer, console, format_temp
from smartcal_cli.utils import parse_date_option, resolve_month

logger = logging.getLogger(__name__)


def month_command(
    year: Annotated[int | None, typer.Argument(help="Year (defaults to this year)")] = None,
    month: Annotated[
        int | None, typer.Argument(help="Month 1-12 (defaults to this month)")
    ] = None,
    weather: Annotated[
        bool, typer.Option("--weather", "-w", help="Show forecast icons in the grid")
    ] = False,
) -> None:
    """Show the month grid.

    Examples:
        smartcal month               # This month
        smartcal month 2026 9        # September 2026
        smartcal month --weather     # With forecast icons
    """
    ctx = get_context()
    today = ctx.today()
    year, month = resolve_month(year, month, today)
    if not 1 <= month <= 12:
        logger.error(f"Invalid month: {month}. Use 1-12.")
        raise typer.Exit(1)

    start = grid_start(year, month)
    holidays = holidays_for_range(start, add_days(start, 41))
    forecast = ctx.forecast() if weather else None

    cells = month_occurrences(
        year,
        month,
        ctx.event_store.list(ctx.owner_id),
        holidays,
        today=today,
        weather=forecast,
    )
    MonthRenderer().render(year, month, cells)


def day_command(
    target: Annotated[str | None, typer.Argument(help="Date (YYYY-MM-DD), defaults to today")] = None,
    weather: Annotated[
        bool, typer.Option("--weather", "-w", help="Include the forecast for the day")
    ] = False,
) -> None:
    """Show everything that occurs on one day."""
    ctx = get_context()
    day = parse_date_option(target) if target else ctx.today()

    events = occurrences_for_day(day, ctx.event_store.list(ctx.owner_id))
    holiday = holiday_on(day, holidays_for_year(day.year))
    info = ctx.forecast().get(day.isoformat()) if weather else None

    RichEventRenderer().render_day(day, events, holiday=holiday, weather=info)


def upcoming_command(
    days: Annotated[int, typer.Option("--days", "-d", help="Number of days to show")] = 7,
) -> None:
    """Show the agenda for the next N days."""
    ctx = get_context()
    today = ctx.today()
    query = EventQuery(ctx.event_store.list(ctx.owner_id))
    subtitle = f"{days} days" if days != 1 else "1 day"
    RichEventRenderer().render_agenda(
        query.upcoming(days=days, ref_date=today), title="Upcoming", subtitle=subtitle, today=today
    )


def holidays_command(
    year: Annotated[int | None, typer.Argument(help="Year (defaults to this year)")] = None,
) -> None:
    """List public holidays for a year."""
    ctx = get_context()
    year = year or ctx.today().year
    holidays = holidays_for_year(year)

    table = Table(title=f"{year} 공휴일", show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("DATE", style="cyan", no_wrap=True)
    table.add_column("DAY", style="dim")
    table.add_column("HOLIDAY", style="red")
    for holiday in holidays:
        table.add_row(holiday.date.isoformat(), display_date(holiday.date), holiday.title)
    console.print(table)


def weather_command() -> None:
    """Show the daily forecast for the configured location."""
    ctx = get_context()
    forecast = ctx.forecast()
    if not forecast:
        console.print("[dim]날씨 정보를 가져올 수 없습니다[/dim]")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("DATE", style="cyan", no_wrap=True)
    table.add_column("")
    table.add_column("MIN", justify="right")
    table.add_column("MAX", justify="right")
    for day, info in sorted(forecast.items()):
        table.add_row(day, info.icon, format_temp(info.min_temp), format_temp(info.max_temp))
    console.print(table)
