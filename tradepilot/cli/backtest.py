"""Backtest commands for TradePilot CLI.

Shows the strategy catalogue and simulated backtest statistics.
"""

from datetime import date
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tradepilot.strategies import RANGE_PRESETS, find_strategy, range_window, timeframe_for

console = Console()

SPARK_BLOCKS = " ▁▂▃▄▅▆▇█"


def _get_settings(ctx: click.Context):
    """Lazily load configuration."""
    from tradepilot.config import load_config

    obj = ctx.find_root().obj or {}
    return load_config(obj.get("config_path"))


def _parse_date(value: Optional[str], param: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a YYYY-MM-DD date", param_hint=param)


def sparkline(values: list[float], width: int = 60) -> str:
    """Render a series as unicode bars, scaled to the series maximum.

    Long series are downsampled to ``width`` columns by taking evenly
    spaced points.
    """
    if not values:
        return ""
    if len(values) > width:
        step = len(values) / width
        values = [values[int(i * step)] for i in range(width)]
    top = max(1.0, max(values))
    levels = len(SPARK_BLOCKS) - 1
    return "".join(SPARK_BLOCKS[round(max(0.0, v) / top * levels)] for v in values)


@click.command()
@click.pass_context
def strategies(ctx: click.Context) -> None:
    """List the strategy catalogue.

    \b
    Examples:
      tradepilot strategies
    """
    settings = _get_settings(ctx)

    table = Table(
        title="Strategies",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Timeframe", justify="center")
    table.add_column("R:R", justify="right")

    for strategy in settings.strategies:
        table.add_row(strategy.id, strategy.name, strategy.timeframe, f"{strategy.rr:g}")

    console.print(table)


@click.command()
@click.argument("strategy_id", required=False)
@click.option(
    "--range", "range_preset",
    type=click.Choice(list(RANGE_PRESETS)),
    default="3m",
    show_default=True,
    help="Data range preset ending today.",
)
@click.option("--from", "from_str", default=None, help="Window start (YYYY-MM-DD). Overrides --range.")
@click.option("--to", "to_str", default=None, help="Window end (YYYY-MM-DD). Overrides --range.")
@click.option(
    "--trades",
    type=int,
    default=None,
    help="Simulated trade cap (default from config, 200).",
)
@click.pass_context
def backtest(
    ctx: click.Context,
    strategy_id: Optional[str],
    range_preset: str,
    from_str: Optional[str],
    to_str: Optional[str],
    trades: Optional[int],
) -> None:
    """Show simulated win rate, expectancy and equity curve.

    STRATEGY_ID defaults to the first strategy in the catalogue. The same
    strategy, window and trade cap always produce the same numbers.

    \b
    Examples:
      tradepilot backtest
      tradepilot backtest ny-open --range 1y
      tradepilot backtest fvg-retest --from 2024-01-01 --to 2024-02-01 --trades 123
    """
    from tradepilot.simulation import simulate

    settings = _get_settings(ctx)

    if strategy_id is None:
        strategy_id = settings.strategies[0].id if settings.strategies else "fvg-retest"

    strategy = find_strategy(settings.strategies, strategy_id)
    if strategy is None:
        console.print(Panel(
            f"[red]Unknown strategy:[/red] {strategy_id}\n\n"
            "Run [cyan]tradepilot strategies[/cyan] to list the catalogue.",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    window_from, window_to = range_window(range_preset)
    window_from = _parse_date(from_str, "--from") or window_from
    window_to = _parse_date(to_str, "--to") or window_to

    trade_cap = settings.trade_count if trades is None else trades
    timeframe = timeframe_for(settings.strategies, strategy_id)

    result = simulate(
        strategy_id,
        timeframe,
        window_from.isoformat(),
        window_to.isoformat(),
        trade_cap,
    )

    curve = [point.equity for point in result.equity]
    final_equity = curve[-1] if curve else 0.0

    text = (
        f"[bold]{strategy.name}[/bold] ({timeframe})\n"
        f"[dim]{window_from.isoformat()} → {window_to.isoformat()} | "
        f"{len(curve)} simulated trades[/dim]\n\n"
        f"Win Rate:    [bold]{result.win_rate}%[/bold]\n"
        f"Expectancy:  [bold]{result.expectancy:.2f} R[/bold]\n"
        f"Final Equity: {final_equity:.2f} R\n\n"
        f"[blue]{sparkline(curve) or '-'}[/blue]"
    )

    console.print(Panel(
        text,
        title="[bold cyan]Backtest (simulated)[/bold cyan]",
        border_style="cyan",
    ))
