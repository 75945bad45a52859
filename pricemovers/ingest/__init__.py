"""Ingestion layer for pricemovers.

Streams the price comparison CSV and converts rows into validated
PriceRecord instances before they reach the selection core.

Submodules:
    stream  -- HTTP (httpx) and local-file CSV row streaming.
    parser  -- Row validation, effective-date parsing and year filtering.
"""

from pricemovers.ingest.parser import InputValidationError, RowLayout, in_year, parse_row
from pricemovers.ingest.stream import SourceFetchError, fetch_rows, iter_csv_rows, open_rows, read_rows

__all__ = [
    "InputValidationError",
    "RowLayout",
    "SourceFetchError",
    "fetch_rows",
    "in_year",
    "iter_csv_rows",
    "open_rows",
    "parse_row",
    "read_rows",
]
