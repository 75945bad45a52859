"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

NADAC_COMPARISON_URL = "https://download.medicaid.gov/data/nadac-comparison-04-17-2024.csv"


@dataclass
class SourceConfig:
    """Where the price comparison CSV is read from."""

    url: str = NADAC_COMPARISON_URL
    timeout_seconds: float = 60.0


@dataclass
class ReportConfig:
    """Report shape."""

    count: int = 10
    year: int = 2023
    label: str = "NADAC per unit"


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class PriceMoversConfig:
    """Top-level pricemovers configuration."""

    source: SourceConfig = field(default_factory=SourceConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    log: LogConfig = field(default_factory=LogConfig)
