"""Journal commands for TradePilot CLI.

Handles recording journal entries, the entry list, the profit calendar
and the performance overview.
"""

from datetime import date
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tradepilot.exceptions import StorageError
from tradepilot.models import Bias, CategoryBreakdown, Direction

console = Console()


def _get_journal_service(ctx: click.Context):
    """Get the journal service backed by the configured database."""
    from tradepilot.config import load_config
    from tradepilot.db.store import DataStore, SqliteJournalRepository
    from tradepilot.journal.service import JournalService

    obj = ctx.find_root().obj or {}
    settings = load_config(obj.get("config_path"))
    try:
        return JournalService(SqliteJournalRepository(DataStore(settings.db_path)))
    except StorageError as e:
        _fail(f"[red]Failed to open journal:[/red]\n\n{str(e)}")


def _fail(message: str) -> None:
    console.print(Panel(
        message,
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def _parse_day(value: Optional[str], param: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a YYYY-MM-DD date", param_hint=param)


def _money(value: float) -> str:
    color = "green" if value >= 0 else "red"
    return f"[{color}]${value:.2f}[/{color}]"


@click.group()
def journal() -> None:
    """Keep and review your trade journal.

    \b
    Examples:
      tradepilot journal add --pnl -150 --trades 3 --long 2
      tradepilot journal list --date 2025-01-02
      tradepilot journal calendar --month 2025-01
      tradepilot journal overview
    """
    pass


@journal.command("add")
@click.option("--date", "date_str", default=None, help="Trading day (YYYY-MM-DD). Defaults to today.")
@click.option("--pnl", default="0", help="Net P/L, e.g. -150 or $92.50.")
@click.option("--trades", default="1", help="Number of trades taken.")
@click.option("--long", "long_str", default="1", help="Long trades (when trades > 1).")
@click.option("--short", "short_str", default="0", help="Short trades (when trades > 1).")
@click.option(
    "--direction",
    type=click.Choice([d.value for d in Direction]),
    default=Direction.LONG.value,
    show_default=True,
    help="Trade direction.",
)
@click.option(
    "--bias",
    type=click.Choice([b.value for b in Bias]),
    default=Bias.BULLISH.value,
    show_default=True,
    help="Market bias.",
)
@click.option("--reason", default="", help="Reason / notes.")
@click.option("--image", default=None, help="Screenshot path or URL.")
@click.pass_context
def add_entry(
    ctx: click.Context,
    date_str: Optional[str],
    pnl: str,
    trades: str,
    long_str: str,
    short_str: str,
    direction: str,
    bias: str,
    reason: str,
    image: Optional[str],
) -> None:
    """Record a journal entry.

    Numbers are read leniently: symbols are ignored and unreadable values
    fall back to defaults. Long and short counts are adjusted so they add
    up to the trade count.

    \b
    Examples:
      tradepilot journal add --pnl 120 --reason "London breakout"
      tradepilot journal add --pnl -80 --trades 4 --long 3 --bias bearish
    """
    entry_date = _parse_day(date_str, "--date") or date.today()
    service = _get_journal_service(ctx)

    try:
        entry = service.add_entry(
            entry_date,
            pnl=pnl,
            trades=trades,
            long_count=long_str,
            short_count=short_str,
            direction=Direction(direction),
            bias=Bias(bias),
            reason=reason,
            image=image,
        )
    except StorageError as e:
        _fail(f"[red]Failed to save entry:[/red]\n\n{str(e)}")

    console.print(Panel(
        f"Date:      {entry.date.isoformat()}\n"
        f"P/L:       {_money(entry.pnl)}\n"
        f"Trades:    {entry.trades} (L:{entry.long_count}/S:{entry.short_count})\n"
        f"Direction: {entry.direction.value.capitalize()}\n"
        f"Bias:      {entry.bias.value.capitalize()}",
        title="[bold green]Entry Saved[/bold green]",
        border_style="green",
    ))


@journal.command("list")
@click.option("--date", "date_str", default=None, help="Only show entries for this day (YYYY-MM-DD).")
@click.pass_context
def list_entries(ctx: click.Context, date_str: Optional[str]) -> None:
    """Show journal entries, newest first.

    \b
    Examples:
      tradepilot journal list
      tradepilot journal list --date 2025-01-02
    """
    day = _parse_day(date_str, "--date")
    service = _get_journal_service(ctx)
    entries = service.entries_for(day)

    title = f"Journal Entries ({day.isoformat()})" if day else "Journal Entries"

    if not entries:
        console.print(Panel(
            "[dim]No entries yet.[/dim]",
            title=f"[bold]{title}[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date", style="bold")
    table.add_column("P/L", justify="right")
    table.add_column("Trades", justify="right")
    table.add_column("Direction")
    table.add_column("Bias")
    table.add_column("Reason", max_width=40)
    table.add_column("Image", style="dim", max_width=20)

    for entry in entries:
        direction = entry.direction.value.capitalize()
        longs, shorts = entry.long_count or 0, entry.short_count or 0
        if longs + shorts > 1:
            direction += f" (L:{longs}/S:{shorts})"
        table.add_row(
            entry.date.isoformat(),
            _money(entry.pnl),
            str(entry.trades),
            direction,
            entry.bias.value.capitalize(),
            entry.reason or "-",
            entry.image or "-",
        )

    console.print(table)


@journal.command("calendar")
@click.option("--month", default=None, help="Month to show (YYYY-MM). Defaults to this month.")
@click.pass_context
def show_calendar(ctx: click.Context, month: Optional[str]) -> None:
    """Show the profit calendar for a month.

    Days are green when net P/L is zero or positive, red when negative.

    \b
    Examples:
      tradepilot journal calendar
      tradepilot journal calendar --month 2025-01
    """
    from tradepilot.journal.aggregate import classify_day
    from tradepilot.journal.calendar import (
        WEEKDAY_LABELS,
        current_year_month,
        day_key,
        month_layout,
        month_totals,
        shift_month,
    )

    year_month = month or current_year_month()
    try:
        layout = month_layout(year_month)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--month")

    service = _get_journal_service(ctx)
    ledger = service.calendar(year_month)
    trades, pnl = month_totals(ledger)

    table = Table(
        title=f"Profit Calendar {year_month}",
        show_header=True,
        header_style="bold cyan",
        show_lines=True,
    )
    for label in WEEKDAY_LABELS:
        table.add_column(label, justify="center", min_width=9)

    cells = [""] * layout.first_weekday
    for day in range(1, layout.days + 1):
        bucket = ledger.get(day_key(layout, day))
        if bucket is None:
            cells.append(f"[dim]{day}[/dim]\n—")
            continue
        kind = classify_day(bucket)
        color = {"win": "green", "loss": "red"}.get(kind, "dim")
        plural = "s" if bucket.trades > 1 else ""
        cells.append(
            f"[dim]{day}[/dim]\n[{color}]${bucket.pnl:.2f}[/{color}]\n"
            f"[dim]{bucket.trades} trade{plural}[/dim]"
        )
    cells += [""] * (-len(cells) % 7)

    for start in range(0, len(cells), 7):
        table.add_row(*cells[start:start + 7])

    console.print(table)
    console.print(f"\n[bold]Trades:[/bold] {trades} • [bold]Net P/L:[/bold] {_money(pnl)}")
    console.print(
        f"[dim]Prev: {shift_month(year_month, -1)} | Next: {shift_month(year_month, 1)}[/dim]"
    )


def _split_line(breakdown: CategoryBreakdown) -> str:
    first_pct, second_pct = breakdown.percentages()
    return (
        f"{first_pct}% {breakdown.first.name} / {second_pct}% {breakdown.second.name}  "
        f"[dim]({breakdown.first.name}: {breakdown.first.value}, "
        f"{breakdown.second.name}: {breakdown.second.value})[/dim]"
    )


@journal.command("overview")
@click.pass_context
def overview(ctx: click.Context) -> None:
    """Show win/loss, long/short and bias splits with daily stats.

    \b
    Examples:
      tradepilot journal overview
    """
    service = _get_journal_service(ctx)
    breakdowns = service.overview()
    summary = service.daily_summary()

    best = (
        f"{summary.best_day.key} ({_money(summary.best_day.pnl)})"
        if summary.best_day is not None
        else "-"
    )

    text = (
        f"[bold]Win/Loss:[/bold]   {_split_line(breakdowns.win_loss)}\n"
        f"[bold]Direction:[/bold]  {_split_line(breakdowns.by_direction)}\n"
        f"[bold]Bias:[/bold]       {_split_line(breakdowns.by_bias)}\n"
        f"{'─' * 40}\n"
        f"Entries: {summary.count} | Win Rate: {summary.win_rate}% | "
        f"Avg P/L: {_money(summary.avg_pnl)}\n"
        f"Best Day: {best}"
    )

    console.print(Panel(
        text,
        title="[bold cyan]Performance Overview[/bold cyan]",
        border_style="cyan",
    ))
