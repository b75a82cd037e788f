"""Rich-based event renderer for terminal display."""

from datetime import date

from rich.console import Console

from smartcal.models.event import ContactEvent, HolidayEvent, PersonalEvent
from smartcal.models.weather import WeatherInfo
from smartcal.share import display_date
from smartcal_cli.display.console import console as shared_console
from smartcal_cli.display.formatters import format_day_label, format_period, format_temp


class RichEventRenderer:
    """Render calendar events using Rich.

    Uses neutral hierarchy-based colors:
    - Headers: bold white
    - Date/day labels: cyan
    - Ids and periods: dim
    - Contacts: green
    - Holidays: red
    """

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def render_day(
        self,
        day: date,
        events: list,
        holiday: HolidayEvent | None = None,
        weather: WeatherInfo | None = None,
    ) -> None:
        """Render the detail view of one day: weather, holiday, contacts, events."""
        self._print_header(display_date(day), day.isoformat())

        if weather:
            self.console.print(
                f"{weather.icon}  {format_temp(weather.min_temp)} / {format_temp(weather.max_temp)}"
            )
        if holiday:
            self.console.print(f"[red]🚩 {holiday.title}[/red]")

        contacts = [e for e in events if isinstance(e, ContactEvent)]
        personal = [e for e in events if isinstance(e, PersonalEvent)]

        if contacts:
            self.console.print(f"\n[bold cyan]연락처 ({len(contacts)})[/bold cyan]")
            for contact in contacts:
                phone = f"  [green]{contact.phone_number}[/green]" if contact.phone_number else ""
                self.console.print(f"  ☎ {contact.title}{phone}  [dim]{contact.id}[/dim]")

        self.console.print(f"\n[bold cyan]일정 목록 ({len(personal)})[/bold cyan]")
        if not personal:
            self.console.print("  [dim]일정이 없습니다[/dim]")
        for event in personal:
            self._render_personal(event)
        self.console.print()

    def render_agenda(
        self,
        days: list[tuple[date, list]],
        title: str | None = None,
        subtitle: str | None = None,
        today: date | None = None,
    ) -> None:
        """Render events grouped by day.

        Args:
            days: (day, events) pairs, ordered by day.
            title: Optional title for the display header.
            subtitle: Optional subtitle (e.g., date range info).
            today: Reference date for relative labels.
        """
        if not days:
            self.render_empty()
            return

        self._print_header(title, subtitle)
        today = today or date.today()
        count = 0
        for day, events in days:
            self.console.print(f"\n[cyan]{format_day_label(day, today)}[/cyan]")
            for event in events:
                if isinstance(event, PersonalEvent):
                    self._render_personal(event)
                elif isinstance(event, ContactEvent):
                    self.console.print(f"  [green]☎ {event.title}[/green]")
                else:
                    self.console.print(f"  [red]🚩 {event.title}[/red]")
                count += 1
        self._print_footer(count)

    def render_list(
        self, events: list, title: str | None = None, subtitle: str | None = None
    ) -> None:
        """Render events as a flat list with their periods and ids."""
        self._print_header(title, subtitle)
        for event in events:
            if isinstance(event, ContactEvent):
                phone = f"  [green]{event.phone_number}[/green]" if event.phone_number else ""
                self.console.print(
                    f"  [green]☎[/green] {event.title}  [dim]{format_period(event)}[/dim]{phone}"
                    f"  [dim]{event.id}[/dim]"
                )
            else:
                marker = "[green]✓[/green]" if event.completed else "•"
                self.console.print(
                    f"  {marker} {event.title}  [dim]{format_period(event)}[/dim]"
                    f"  [dim]{event.id}[/dim]"
                )
        self._print_footer(len(events))

    def render_empty(self, message: str | None = None) -> None:
        msg = message or "No events found"
        self.console.print(f"\n[dim]{msg}[/dim]\n")

    # ─────────────────────────────────────────────────────────────────────────
    # Private helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _render_personal(self, event: PersonalEvent) -> None:
        marker = "[green]✓[/green]" if event.completed else "•"
        title = f"[strike dim]{event.title}[/strike dim]" if event.completed else event.title
        period = f"  [dim]{format_period(event)}[/dim]" if event.is_range else ""
        self.console.print(f"  {marker} {title}{period}  [dim]{event.id}[/dim]")
        if event.description:
            self.console.print(f"      [dim italic]{event.description}[/dim italic]")

    def _print_header(self, title: str | None, subtitle: str | None) -> None:
        self.console.print()
        self.console.print("━" * 40)
        if title:
            header_text = f"  {title}"
            if subtitle:
                header_text += f" [dim]({subtitle})[/dim]"
            self.console.print(f"[bold]{header_text}[/bold]")
        self.console.print("━" * 40)

    def _print_footer(self, count: int) -> None:
        self.console.print()
        self.console.print("─" * 40)
        self.console.print(f"[dim]{count} event{'s' if count != 1 else ''}[/dim]")
