"""Configuration loading from environment variables."""

from __future__ import annotations

import os
import re

from pricemovers.models.config import (
    NADAC_COMPARISON_URL,
    LogConfig,
    PriceMoversConfig,
    ReportConfig,
    SourceConfig,
)
from pricemovers.observability.logging import LOG_FORMATS


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"PRICEMOVERS_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _env_float(key: str, default: float, min_val: float | None = None) -> float:
    val = float(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    return val


def _validate_count(value: int) -> int:
    if value < 1:
        raise ValueError(f"Invalid report count: {value}. Must be at least 1")
    return value


def _validate_source(value: str) -> str:
    if not value.strip():
        raise ValueError("Source URL must not be empty")
    if re.match(r"^[a-zA-Z][a-zA-Z0-9+.-]*://", value) and not value.startswith(("http://", "https://", "file://")):
        raise ValueError(f"Unsupported source scheme: {value}")
    return value


def _validate_log_format(value: str) -> str:
    if value.lower() not in LOG_FORMATS:
        raise ValueError(f"Invalid log format: {value}. Must be one of {LOG_FORMATS}")
    return value.lower()


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> PriceMoversConfig:
    """Load configuration from PRICEMOVERS_* environment variables."""
    return PriceMoversConfig(
        source=SourceConfig(
            url=_validate_source(_env("URL", NADAC_COMPARISON_URL)),
            timeout_seconds=_env_float("TIMEOUT", 60.0, min_val=1.0),
        ),
        report=ReportConfig(
            count=_validate_count(int(_env("COUNT", "10"))),
            year=_env_int("YEAR", 2023, min_val=1900, max_val=9999),
            label=_env("LABEL", "NADAC per unit"),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
    )
