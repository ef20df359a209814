"""Configuration loading for TradePilot.

Settings live in ``~/.config/tradepilot/config.toml``. Every value has a
default, so a missing or unreadable file still yields usable settings.
"""

import logging
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError

from tradepilot.exceptions import ConfigError
from tradepilot.models.strategy import Strategy
from tradepilot.strategies import DEFAULT_STRATEGIES

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "tradepilot"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_DB_PATH = CONFIG_DIR / "tradepilot.db"


class Settings(BaseModel):
    """Resolved application settings."""

    db_path: Path = Field(default=DEFAULT_DB_PATH, description="SQLite journal database")
    trade_count: int = Field(default=200, ge=0, description="Simulated trade cap")
    strategies: list[Strategy] = Field(
        default_factory=lambda: list(DEFAULT_STRATEGIES),
        description="Strategy catalogue",
    )

    model_config = {"frozen": True}


def _section(data: dict, name: str) -> dict:
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}


def parse_config(data: dict) -> Settings:
    """Build settings from a parsed TOML document.

    Raises:
        ConfigError: If a section has values of the wrong type.
    """
    values: dict = {}

    storage = _section(data, "storage")
    if "db_path" in storage:
        values["db_path"] = Path(str(storage["db_path"])).expanduser()

    backtest = _section(data, "backtest")
    if "trade_count" in backtest:
        values["trade_count"] = backtest["trade_count"]

    if data.get("strategies"):
        values["strategies"] = data["strategies"]

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(path: Optional[Path] = None) -> Settings:
    """Load settings, falling back to defaults when the file is unusable.

    Args:
        path: Config file path. Defaults to ``~/.config/tradepilot/config.toml``.

    Returns:
        Resolved settings.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return Settings()

    try:
        return parse_config(toml.load(config_path))
    except (toml.TomlDecodeError, ConfigError) as e:
        logger.warning("Ignoring config %s: %s", config_path, e)
        return Settings()
