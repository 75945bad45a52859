"""Entry point for `python -m pricemovers`.

Usage:
    python -m pricemovers --year 2020 --count 10
    uv run python -m pricemovers
"""

from __future__ import annotations

from pricemovers.cli import cli

cli()
