"""Tests for structlog configuration."""

from __future__ import annotations

import logging

import structlog
from structlog.testing import capture_logs

from pricemovers.observability.logging import get_logger, setup_logging


def test_setup_logging_filters_below_level() -> None:
    try:
        setup_logging("warning")
        assert structlog.is_configured()
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.WARNING)
    finally:
        structlog.reset_defaults()


def test_unknown_level_falls_back_to_info() -> None:
    try:
        setup_logging("chatty")
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.INFO)
    finally:
        structlog.reset_defaults()


def test_get_logger_binds_component() -> None:
    with capture_logs() as captured:
        get_logger("selection.tracker").info("hello", rows=3)
    assert captured == [{"component": "selection.tracker", "rows": 3, "event": "hello", "log_level": "info"}]


def test_console_format_uses_console_renderer() -> None:
    try:
        setup_logging("info", fmt="console")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    finally:
        structlog.reset_defaults()


def test_json_format_is_default() -> None:
    try:
        setup_logging("info")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    finally:
        structlog.reset_defaults()
