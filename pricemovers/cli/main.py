"""Click entry point for the ``pricemovers`` script.

Command-line options override the PRICEMOVERS_* environment configuration.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace

import click

from pricemovers.app import run
from pricemovers.config import load_config
from pricemovers.ingest.parser import InputValidationError
from pricemovers.ingest.stream import SourceFetchError
from pricemovers.models.config import PriceMoversConfig
from pricemovers.observability.logging import get_logger, setup_logging
from pricemovers.selection.pool import InvalidCapacityError


def _resolve_config(
    url: str | None,
    count: int | None,
    year: int | None,
    timeout: float | None,
    log_level: str | None,
    log_format: str | None = None,
) -> PriceMoversConfig:
    try:
        config = load_config()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    if url is not None:
        config.source = replace(config.source, url=url)
    if timeout is not None:
        config.source = replace(config.source, timeout_seconds=timeout)
    if count is not None:
        config.report = replace(config.report, count=count)
    if year is not None:
        config.report = replace(config.report, year=year)
    if log_level is not None:
        config.log = replace(config.log, level=log_level.lower())
    if log_format is not None:
        config.log = replace(config.log, format=log_format.lower())
    return config


@click.command(name="pricemovers")
@click.option("-u", "--url", default=None, help="Price comparison CSV URL or local file path.")
@click.option(
    "-c",
    "--count",
    type=click.IntRange(min=1),
    default=None,
    help="Number of top price increases and decreases to report.",
)
@click.option("-y", "--year", type=int, default=None, help="Effective-date year to report on.")
@click.option("--timeout", type=click.FloatRange(min=1.0), default=None, help="HTTP timeout in seconds.")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Log level for the logs written to stderr.",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "console"], case_sensitive=False),
    default=None,
    help="Log rendering on stderr.",
)
@click.version_option(package_name="pricemovers")
def cli(
    url: str | None,
    count: int | None,
    year: int | None,
    timeout: float | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Report the largest per-unit price increases and decreases of a year."""
    config = _resolve_config(url, count, year, timeout, log_level, log_format)
    setup_logging(config.log.level, config.log.format)
    log = get_logger("cli")

    try:
        report = asyncio.run(run(config))
    except (InputValidationError, SourceFetchError, InvalidCapacityError) as exc:
        log.error("report aborted", error=str(exc))
        raise click.ClickException(str(exc)) from exc

    click.echo(report, nl=False)
