"""Configuration management for bank-ledger."""

import os
from dataclasses import dataclass, field

from bank_ledger.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class DisplayConfig:
    """Rendering options for console output."""

    currency: str = "руб."
    timestamp_format: str = "%d.%m.%Y %H:%M:%S"
    date_format: str = "%Y-%m-%d"


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        display = DisplayConfig(
            currency=os.getenv("LEDGER_CURRENCY", "руб."),
        )

        seed_str = os.getenv("LEDGER_SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"LEDGER_SEED must be an integer, got {seed_str!r}") from e

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        return cls(
            display=display,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
