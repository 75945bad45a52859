"""Core data structures for pricemovers."""

from pricemovers.models.config import (
    LogConfig,
    PriceMoversConfig,
    ReportConfig,
    SourceConfig,
)
from pricemovers.models.records import PoolEntry, PoolMode, PriceRecord, as_decimal

__all__ = [
    "LogConfig",
    "PoolEntry",
    "PoolMode",
    "PriceMoversConfig",
    "PriceRecord",
    "ReportConfig",
    "SourceConfig",
    "as_decimal",
]
