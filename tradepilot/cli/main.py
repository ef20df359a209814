"""Main CLI entry point for TradePilot.

This module provides the main click group and lazy loading
for heavy imports to improve startup time.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

# Log output goes to stderr so it never mixes with rendered tables
log_console = Console(stderr=True)


class LazyGroup(click.Group):
    """Group whose subcommands are imported the first time they run.

    ``lazy_subcommands`` maps a command name to the module defining a
    click command of that same name.
    """

    def __init__(self, *args, lazy_subcommands: Optional[dict[str, str]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.lazy_subcommands = dict(lazy_subcommands or {})

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(set(super().list_commands(ctx)) | set(self.lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        command = super().get_command(ctx, cmd_name)
        if command is None and cmd_name in self.lazy_subcommands:
            command = self._import_command(cmd_name)
        return command

    def _import_command(self, cmd_name: str) -> click.Command:
        import importlib

        module_path = self.lazy_subcommands[cmd_name]
        command = getattr(importlib.import_module(module_path), cmd_name, None)
        if not isinstance(command, click.Command):
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(command, cmd_name)
        return command


# Define lazy subcommands mapping
LAZY_SUBCOMMANDS = {
    "strategies": "tradepilot.cli.backtest",
    "backtest": "tradepilot.cli.backtest",
    "journal": "tradepilot.cli.journal",
    "news": "tradepilot.cli.news",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tradepilot")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (default: ~/.config/tradepilot/config.toml).",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    default=False,
    help="Show debug logging.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """TradePilot - trading performance dashboard for the terminal.
    
    Simulate strategy statistics, keep a trade journal, and review
    your results by day, month, direction and bias.
    
    \b
    Quick Start:
      tradepilot backtest fvg-retest      # Simulated strategy stats
      tradepilot journal add --pnl 120    # Record a trading day
      tradepilot journal calendar         # Profit calendar
      tradepilot journal overview         # Win/loss, long/short, bias splits
    """
    # Ensure context object exists for passing data between commands
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    configure_logging(verbose)


def configure_logging(verbose: bool) -> None:
    """Route log records through rich; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=log_console, show_path=False)],
        force=True,
    )


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
