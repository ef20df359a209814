"""CLI commands for TradePilot.

This package provides the command-line interface for TradePilot,
including simulated backtests, the trade journal and the economic calendar.
"""

from tradepilot.cli.main import cli, main

__all__ = ["cli", "main"]
