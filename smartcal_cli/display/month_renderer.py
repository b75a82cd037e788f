"""Month grid renderer."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from smartcal.dates import SATURDAY, SUNDAY, sunday_index
from smartcal.models.day import DayCell
from smartcal.models.event import ContactEvent, PersonalEvent
from smartcal.share import WEEKDAYS
from smartcal_cli.display.console import console as shared_console
from smartcal_cli.display.formatters import format_temp

# Events shown per cell before collapsing into "+N"
MAX_EVENTS_PER_CELL = 3


class MonthRenderer:
    """Render the 6x7 month grid as a Rich table.

    Sundays and holidays are red, Saturdays blue, spillover days dim and
    today reversed.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or shared_console

    def render(self, year: int, month: int, cells: list[DayCell]) -> None:
        table = Table(
            title=f"{year}년 {month}월",
            show_lines=True,
            expand=True,
            header_style="bold",
        )
        for index, name in enumerate(WEEKDAYS):
            style = "red" if index == SUNDAY else "blue" if index == SATURDAY else ""
            table.add_column(name, style=style, ratio=1, vertical="top")

        for week in range(len(cells) // 7):
            row = cells[week * 7 : (week + 1) * 7]
            table.add_row(*(self._cell(cell) for cell in row))

        self.console.print(table)

    def _day_style(self, cell: DayCell) -> str:
        if cell.is_today:
            return "bold reverse"
        if not cell.is_current_month:
            return "dim"
        weekday = sunday_index(cell.date)
        if weekday == SUNDAY or cell.holiday:
            return "bold red"
        if weekday == SATURDAY:
            return "bold blue"
        return "bold"

    def _cell(self, cell: DayCell) -> Text:
        text = Text()
        text.append(str(cell.date.day), style=self._day_style(cell))
        if cell.weather:
            text.append(f" {cell.weather.icon}{format_temp(cell.weather.max_temp)}", style="dim")
        if cell.holiday:
            text.append(f"\n{cell.holiday.title}", style="red")

        dim = "dim" if not cell.is_current_month else ""
        for event in cell.events[:MAX_EVENTS_PER_CELL]:
            text.append("\n")
            text.append(self._event_label(event, cell), style=self._event_style(event, dim))
        hidden = len(cell.events) - MAX_EVENTS_PER_CELL
        if hidden > 0:
            text.append(f"\n+{hidden}", style="dim")
        return text

    def _event_label(self, event, cell: DayCell) -> str:
        if isinstance(event, ContactEvent):
            return f"☎ {event.title}"
        marker = "✓" if event.completed else "•"
        # Continuation days of a range show only the bar
        if event.is_range and cell.date != event.start_date:
            return f"─ {event.title}"
        return f"{marker} {event.title}"

    def _event_style(self, event, base: str) -> str:
        styles = [base] if base else []
        if isinstance(event, PersonalEvent) and event.completed:
            styles.append("strike dim")
        elif isinstance(event, ContactEvent):
            styles.append("green")
        return " ".join(styles)
