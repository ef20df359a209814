"""Mock backtest engine.

Produces performance statistics that look like a backtest but are
synthesized from a seeded stream, so the same strategy and window always
render the same numbers.
"""

import logging

from tradepilot.models.backtest import BacktestFingerprint, BacktestResult, EquityPoint
from tradepilot.models.summary import round_half_up
from tradepilot.simulation.rng import Mulberry32, derive_seed

logger = logging.getLogger(__name__)

MAX_EQUITY_POINTS = 300


def _coerce_count(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def simulate_fingerprint(fingerprint: BacktestFingerprint) -> BacktestResult:
    """Run the simulation for a prepared fingerprint.

    Args:
        fingerprint: Strategy, timeframe, window and trade cap.

    Returns:
        Win rate in [45, 75], expectancy in [-0.2, 1.2) and an equity
        curve of ``min(trade_count, 300)`` points floored at zero.
    """
    seed = derive_seed(fingerprint.as_string())
    rng = Mulberry32(seed)

    win_rate = round_half_up(45 + rng() * 30)
    expectancy = rng() * 1.4 - 0.2

    points = max(0, min(fingerprint.trade_count, MAX_EQUITY_POINTS))
    equity = []
    eq = 0.0
    for i in range(points):
        # Running sum may dip below zero; only the emitted point is floored.
        eq += expectancy + (rng() - 0.5)
        equity.append(EquityPoint(index=i, equity=max(0.0, eq)))

    logger.debug(
        "Simulated %s/%s seed=%d win_rate=%d points=%d",
        fingerprint.strategy_id, fingerprint.timeframe, seed, win_rate, points,
    )
    return BacktestResult(win_rate=win_rate, expectancy=expectancy, equity=equity)


def simulate(
    strategy_id: str,
    timeframe: str,
    from_date: str,
    to_date: str,
    trade_count: int,
) -> BacktestResult:
    """Simulate backtest statistics for a strategy and time window.

    Inputs are coerced, never rejected: non-string fields are stringified
    and a trade count that is not an integer counts as 0.
    """
    fingerprint = BacktestFingerprint(
        strategy_id=str(strategy_id),
        timeframe=str(timeframe),
        from_date=str(from_date),
        to_date=str(to_date),
        trade_count=_coerce_count(trade_count),
    )
    return simulate_fingerprint(fingerprint)
