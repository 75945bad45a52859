"""Row parsing and date filtering for the price comparison CSV.

Turns raw CSV field lists into validated PriceRecord instances.  Any row the
core cannot consume is rejected here with an InputValidationError; the
ChangeTracker never sees malformed values.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from pricemovers.models.records import PriceRecord, as_decimal

_DATE_FORMAT = "%m/%d/%Y"


class InputValidationError(ValueError):
    """Raised when a source row is missing a field or holds an unparseable value."""

    def __init__(self, row_number: int, field_name: str, reason: str) -> None:
        super().__init__(f"Row {row_number}: {field_name}: {reason}")
        self.row_number = row_number
        self.field_name = field_name
        self.reason = reason


@dataclass(frozen=True)
class RowLayout:
    """Zero-based column positions of the fields we read.

    Defaults match the NADAC comparison file.
    """

    description: int = 0
    start: int = 2
    end: int = 3
    effective_date: int = 9


def _field(fields: Sequence[str], index: int, name: str, row_number: int) -> str:
    if index >= len(fields):
        raise InputValidationError(row_number, name, "missing column")
    return fields[index]


def _price(fields: Sequence[str], index: int, name: str, row_number: int) -> Decimal:
    raw = _field(fields, index, name, row_number)
    try:
        return as_decimal(raw)
    except ValueError as exc:
        raise InputValidationError(row_number, name, f"not a decimal price: {raw!r}") from exc


def parse_date(raw: str, row_number: int = 0) -> date:
    """Parse an ``MM/DD/YYYY`` effective date."""
    try:
        return datetime.strptime(raw.strip(), _DATE_FORMAT).date()
    except ValueError as exc:
        raise InputValidationError(row_number, "effective_date", f"not an MM/DD/YYYY date: {raw!r}") from exc


def parse_row(
    fields: Sequence[str],
    row_number: int,
    layout: RowLayout | None = None,
) -> PriceRecord | None:
    """Build a PriceRecord from one CSV row.

    Returns None for rows without an effective date; those carry no dated
    price change and are skipped rather than rejected.

    Raises:
        InputValidationError: for missing columns or unparseable values.
    """
    layout = layout or RowLayout()
    raw_date = _field(fields, layout.effective_date, "effective_date", row_number)
    if not raw_date.strip():
        return None

    return PriceRecord(
        description=_field(fields, layout.description, "description", row_number),
        start=_price(fields, layout.start, "start_price", row_number),
        end=_price(fields, layout.end, "end_price", row_number),
        effective_date=parse_date(raw_date, row_number),
        row_number=row_number,
    )


def in_year(record: PriceRecord, year: int) -> bool:
    return record.effective_date.year == year
