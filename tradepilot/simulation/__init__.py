"""Deterministic backtest simulation."""

from tradepilot.simulation.backtest import MAX_EQUITY_POINTS, simulate, simulate_fingerprint
from tradepilot.simulation.rng import Mulberry32, derive_seed

__all__ = [
    "MAX_EQUITY_POINTS",
    "Mulberry32",
    "derive_seed",
    "simulate",
    "simulate_fingerprint",
]
