"""Economic calendar command for TradePilot CLI."""

from datetime import date
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tradepilot.news import (
    CURRENCIES,
    DEFAULT_CURRENCIES,
    IMPACT_LEVELS,
    calendar_events,
    filter_currencies,
    insight,
)

console = Console()

IMPACT_STYLES = {
    "high": "red",
    "medium": "dark_orange",
    "low": "yellow",
}


@click.command()
@click.option("--date", "date_str", default=None, help="Calendar day (YYYY-MM-DD). Defaults to today.")
@click.option(
    "--impact",
    type=click.Choice(IMPACT_LEVELS),
    default="all",
    show_default=True,
    help="Only show events with this impact.",
)
@click.option(
    "--ccy",
    "currencies",
    multiple=True,
    type=click.Choice(CURRENCIES, case_sensitive=False),
    help="Currency to include (repeatable). Defaults to USD, EUR, GBP.",
)
@click.option("--all-ccy", is_flag=True, default=False, help="Include every currency.")
@click.option("--no-ai", is_flag=True, default=False, help="Hide the commentary line.")
def news(
    date_str: Optional[str],
    impact: str,
    currencies: tuple[str, ...],
    all_ccy: bool,
    no_ai: bool,
) -> None:
    """Show the economic calendar (sample data).

    \b
    Examples:
      tradepilot news
      tradepilot news --impact high --ccy USD --ccy JPY
      tradepilot news --all-ccy
    """
    day = date_str or date.today().isoformat()
    try:
        date.fromisoformat(day)
    except ValueError:
        raise click.BadParameter(f"'{day}' is not a YYYY-MM-DD date", param_hint="--date")

    selected = [] if all_ccy else (list(currencies) or DEFAULT_CURRENCIES)
    events = filter_currencies(calendar_events(day, impact), selected)

    table = Table(
        title=f"Economic Calendar {day} (sample data)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Time", style="dim")
    table.add_column("Currency", style="bold")
    table.add_column("Event")
    table.add_column("Impact")
    table.add_column("Forecast", justify="right")
    table.add_column("Previous", justify="right")
    table.add_column("Actual", justify="right")

    for event in events:
        style = IMPACT_STYLES[event.impact]
        table.add_row(
            event.time,
            event.ccy,
            f"[{style}]●[/{style}] {event.title}",
            event.impact.capitalize(),
            event.forecast or "—",
            event.previous or "—",
            event.actual or "—",
        )

    if events:
        console.print(table)
    else:
        console.print("[dim]No events match the selected filters[/dim]")

    console.print(Panel(
        "(AI off)" if no_ai else insight(events),
        title="[bold]AI Insight (prototype)[/bold]",
        border_style="dim",
    ))
