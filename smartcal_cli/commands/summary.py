"""Monthly summary and AI assistant commands."""

import logging

import typer
from rich.panel import Panel
from typing_extensions import Annotated

from smartcal.summary import format_event_line, monthly_summary
from smartcal_cli.context import get_context
from smartcal_cli.display import console
from smartcal_cli.utils import resolve_month

logger = logging.getLogger(__name__)


def summary_command(
    year: Annotated[int | None, typer.Argument(help="Year (defaults to this year)")] = None,
    month: Annotated[
        int | None, typer.Argument(help="Month 1-12 (defaults to this month)")
    ] = None,
    ai: Annotated[bool, typer.Option("--ai", help="Add an AI-written briefing")] = False,
) -> None:
    """Show the monthly summary with completion statistics."""
    ctx = get_context()
    year, month = resolve_month(year, month, ctx.today())
    if not 1 <= month <= 12:
        logger.error(f"Invalid month: {month}. Use 1-12.")
        raise typer.Exit(1)

    summary = monthly_summary(ctx.event_store.list(ctx.owner_id), year, month)

    console.print(f"\n[bold]{year}년 {month}월 요약[/bold]")
    console.print(
        f"  전체 {summary.total}  ·  완료 [green]{summary.completed}[/green]"
        f"  ·  진행중 {summary.pending}  ·  완료율 [bold]{summary.completion_rate}%[/bold]"
    )
    if summary.events:
        console.print()
        for event in summary.events:
            console.print(f"  {format_event_line(event)}", markup=False, highlight=False)
    else:
        console.print("\n  [dim]이번 달 일정이 없습니다[/dim]")

    if ai:
        briefing = ctx.text_provider.summarize(summary.events, f"{year}년 {month}월")
        console.print()
        console.print(Panel(briefing, title="✨ AI 브리핑", expand=False))


def chat_command(
    prompt: Annotated[str, typer.Argument(help="Question for the calendar assistant")],
) -> None:
    """Ask the calendar assistant a question."""
    ctx = get_context()
    today = ctx.today()
    answer = ctx.text_provider.chat(prompt, f"{today.year}년 {today.month}월")
    console.print(answer, markup=False, highlight=False)
