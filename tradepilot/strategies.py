"""Strategy catalogue and backtest window presets."""

import random
import re
import string
from datetime import date, timedelta
from typing import Optional

from tradepilot.models.strategy import Strategy

DEFAULT_TIMEFRAME = "M15"
ALL_HISTORY_START = date(2015, 1, 1)

DEFAULT_STRATEGIES = [
    Strategy(id="fvg-retest", name="FVG + Retest", rr=2, timeframe="M15"),
    Strategy(id="break-retest", name="Break & Retest", rr=1.5, timeframe="H1"),
    Strategy(id="ny-open", name="NY Open Range", rr=1.2, timeframe="M5"),
    Strategy(id="ict-silver-bullet", name="Silver Bullet (ICT)", rr=2, timeframe="M5"),
    Strategy(id="ict-venom", name="Venom (ICT)", rr=1.8, timeframe="M15"),
]

# Preset -> months to step back from today ("all" is anchored to a fixed start)
RANGE_PRESETS = {
    "1m": 1,
    "3m": 3,
    "6m": 6,
    "1y": 12,
    "all": None,
}

_ID_ALPHABET = string.digits + string.ascii_lowercase


def slugify(name: str) -> str:
    """Lower-case a name and collapse whitespace runs into hyphens."""
    return re.sub(r"\s+", "-", name.lower())


def new_strategy(name: str, rng: Optional[random.Random] = None) -> Strategy:
    """Create a strategy with a unique-ish id and default parameters.

    Args:
        name: Display name entered by the user.
        rng: Optional random source for the id suffix.

    Returns:
        A strategy with rr 2 on the default timeframe.
    """
    rng = rng or random.Random()
    suffix = "".join(rng.choice(_ID_ALPHABET) for _ in range(4))
    return Strategy(id=f"{slugify(name)}-{suffix}", name=name, timeframe=DEFAULT_TIMEFRAME)


def find_strategy(strategies: list[Strategy], strategy_id: str) -> Optional[Strategy]:
    for strategy in strategies:
        if strategy.id == strategy_id:
            return strategy
    return None


def timeframe_for(strategies: list[Strategy], strategy_id: str) -> str:
    """Timeframe of the selected strategy, falling back to M15."""
    strategy = find_strategy(strategies, strategy_id)
    if strategy is None or not strategy.timeframe:
        return DEFAULT_TIMEFRAME
    return strategy.timeframe


def months_back(day: date, months: int) -> date:
    """Step back whole calendar months, clamping to the target month's length."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)
    last_day = (next_month - timedelta(days=1)).day
    return date(year, month, min(day.day, last_day))


def range_window(preset: str, today: Optional[date] = None) -> tuple[date, date]:
    """Resolve a data-range preset into a ``(from, to)`` window ending today.

    Raises:
        KeyError: If the preset is unknown.
    """
    today = today or date.today()
    months = RANGE_PRESETS[preset]
    if months is None:
        return ALL_HISTORY_START, today
    return months_back(today, months), today
