"""Observability helpers (structured logging) for pricemovers."""

from pricemovers.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
