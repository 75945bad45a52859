"""Report pipeline for pricemovers.

Wires the pieces in order: source stream -> row parser -> year filter ->
ChangeTracker -> report renderer.  The whole run aborts on the first
unreadable source or malformed row; a partial top/bottom report that
silently skipped data would be misleading.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import asdict, dataclass

from pricemovers.ingest.parser import RowLayout, in_year, parse_row
from pricemovers.ingest.stream import CsvRow, open_rows
from pricemovers.models.config import PriceMoversConfig
from pricemovers.observability.logging import get_logger
from pricemovers.report import render_report
from pricemovers.selection.tracker import ChangeTracker

_logger = get_logger("app")

_PROGRESS_EVERY = 100_000


@dataclass
class IngestStats:
    """Row counters for one ingestion run."""

    rows_read: int = 0
    rows_undated: int = 0
    rows_other_years: int = 0
    rows_recorded: int = 0
    rows_retained: int = 0


async def ingest(
    rows: AsyncIterator[CsvRow],
    tracker: ChangeTracker,
    year: int,
    layout: RowLayout | None = None,
) -> IngestStats:
    """Feed every row of *year* from *rows* into *tracker*, in stream order.

    Raises:
        InputValidationError: on the first malformed row.
        SourceFetchError: if the stream fails part-way.
    """
    stats = IngestStats()
    async for row_number, fields in rows:
        stats.rows_read += 1
        if stats.rows_read % _PROGRESS_EVERY == 0:
            _logger.debug("ingest progress", **asdict(stats))

        record = parse_row(fields, row_number, layout)
        if record is None:
            stats.rows_undated += 1
            continue
        if not in_year(record, year):
            stats.rows_other_years += 1
            continue

        stats.rows_recorded += 1
        if tracker.record(record.description, record.start, record.end) is not None:
            stats.rows_retained += 1
    return stats


async def generate_price_change_report(
    source: str,
    year: int,
    count: int,
    timeout: float = 60.0,
    label: str = "NADAC per unit",
    rows: AsyncIterator[CsvRow] | None = None,
) -> str:
    """Stream *source* and render the top *count* increases and decreases of *year*.

    *rows* overrides the stream opened from *source* (used by tests and by
    callers that already hold an open stream).
    """
    tracker = ChangeTracker(count)
    _logger.info("report starting", source=source, year=year, count=count)

    stats = await ingest(rows if rows is not None else open_rows(source, timeout=timeout), tracker, year)

    _logger.info(
        "report finished",
        increases=len(tracker.most),
        decreases=len(tracker.least),
        descriptions=len(tracker.registry),
        **asdict(stats),
    )
    return render_report(tracker, count, year, label)


async def run(config: PriceMoversConfig) -> str:
    """Generate the report described by *config*."""
    return await generate_price_change_report(
        source=config.source.url,
        year=config.report.year,
        count=config.report.count,
        timeout=config.source.timeout_seconds,
        label=config.report.label,
    )
