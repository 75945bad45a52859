"""Core record data structures and enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation, localcontext
from enum import StrEnum
from typing import NamedTuple


class PoolMode(StrEnum):
    """Which end of the ordering a SelectionPool retains."""

    MOST = "most"
    LEAST = "least"


class PoolEntry(NamedTuple):
    """A retained difference and the code of its description."""

    difference: Decimal
    code: int


@dataclass(frozen=True)
class PriceRecord:
    """One validated row of the price comparison source.

    Produced by the ingestion parser, consumed by the ChangeTracker.
    """

    description: str
    start: Decimal
    end: Decimal
    effective_date: date
    row_number: int = 0

    @property
    def difference(self) -> Decimal:
        return exact_difference(self.start, self.end)


def as_decimal(value: Decimal | int | str) -> Decimal:
    """Coerce *value* to an exact Decimal.

    Raises:
        ValueError: if *value* is not a finite decimal number.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Expected a decimal string or integer, got {type(value).__name__}")
    else:
        try:
            result = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation as exc:
            raise ValueError(f"Not a decimal number: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite decimal number: {value!r}")
    return result


def exact_difference(start: Decimal, end: Decimal) -> Decimal:
    """Return ``end - start`` without rounding to the context precision."""
    lowest_exponent = min(int(start.as_tuple().exponent), int(end.as_tuple().exponent))
    digits = max(start.adjusted(), end.adjusted()) - lowest_exponent + 2
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        return end - start
