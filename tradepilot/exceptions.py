"""Exception types for TradePilot."""


class TradePilotError(Exception):
    """Base class for TradePilot errors."""


class ConfigError(TradePilotError):
    """Raised when a configuration file cannot be used."""


class StorageError(TradePilotError):
    """Raised when the journal store cannot be read or written."""
