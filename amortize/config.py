"""Configuration management for amortize."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

from amortize.exceptions import ConfigurationError


def _format_bound(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:f}".rstrip("0")


@dataclass(frozen=True)
class Range:
    """Closed interval ``[low, high]``."""

    low: float
    high: float

    def contains(self, value: float) -> bool:
        """Check whether ``value`` lies within the interval (NaN never does)."""
        return self.low <= value <= self.high

    def describe(self) -> str:
        """Human-readable bounds, e.g. ``"1 and 1,000,000"``."""
        return f"{_format_bound(self.low)} and {_format_bound(self.high)}"


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


AMOUNT_RANGE = Range(0.01, 1_000_000_000_000.0)
RATE_RANGE = Range(0.000001, 100.0)
TERM_RANGE = Range(1, 1_000_000)


@dataclass(frozen=True)
class BoundsConfig:
    """Accepted ranges for loan inputs.

    Amount is in dollars, rate in annual percent, term in whole years.
    """

    amount: Range = AMOUNT_RANGE
    rate: Range = RATE_RANGE
    term_years: Range = TERM_RANGE


@dataclass
class EngineConfig:
    """Schedule engine configuration."""

    # None disables the hard cap on schedule length
    max_periods: int | None = None

    def __post_init__(self) -> None:
        if self.max_periods is not None and self.max_periods < 1:
            raise ConfigurationError(f"max_periods must be positive, got {self.max_periods}")


@dataclass
class OutputConfig:
    """Output configuration."""

    format: OutputFormat = OutputFormat.TABLE
    pretty_json: bool = False
    show_summary: bool = True
    max_records: int | None = None

    def __post_init__(self) -> None:
        if self.max_records is not None and self.max_records < 1:
            raise ConfigurationError(f"max_records must be positive, got {self.max_records}")


@dataclass
class AmortizeConfig:
    """Main configuration for amortize."""

    bounds: BoundsConfig = field(default_factory=BoundsConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AmortizeConfig":
        """Create config from environment variables."""
        max_periods_str = os.getenv("AMORTIZE_MAX_PERIODS")
        try:
            max_periods = int(max_periods_str) if max_periods_str else None
        except ValueError:
            raise ConfigurationError(
                f"AMORTIZE_MAX_PERIODS must be an integer, got {max_periods_str!r}"
            ) from None

        format_str = os.getenv("OUTPUT_FORMAT", "table").lower()
        try:
            output_format = OutputFormat(format_str)
        except ValueError:
            raise ConfigurationError(f"Unknown OUTPUT_FORMAT: {format_str!r}") from None

        output = OutputConfig(
            format=output_format,
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            engine=EngineConfig(max_periods=max_periods),
            output=output,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
