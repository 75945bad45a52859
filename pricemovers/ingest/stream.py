"""Streaming CSV sources.

Rows are pulled lazily, one at a time and in source order, either from an
HTTP endpoint (httpx streaming response) or from a local file.  Nothing
here buffers the whole file.
"""

from __future__ import annotations

import csv
import io
from collections.abc import AsyncIterator
from pathlib import Path

import httpx

from pricemovers.observability.logging import get_logger

_logger = get_logger("ingest.stream")

CsvRow = tuple[int, list[str]]


class SourceFetchError(Exception):
    """Raised when the CSV source cannot be opened or read to completion."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to read {source}: {reason}")
        self.source = source
        self.reason = reason


async def iter_csv_rows(lines: AsyncIterator[str], skip_header: bool = True) -> AsyncIterator[CsvRow]:
    """Turn an async stream of text lines into ``(row_number, fields)`` pairs.

    Row numbers count CSV records from 1, header included, so the first data
    row is row 2.  A quoted field containing line breaks is re-joined before
    parsing.  Blank lines are skipped.
    """
    pending: list[str] = []
    row_number = 0
    async for line in lines:
        pending.append(line.rstrip("\r\n"))
        text = "\n".join(pending)
        if text.count('"') % 2:
            continue
        pending.clear()
        if not text.strip():
            continue

        row_number += 1
        if skip_header and row_number == 1:
            continue
        yield row_number, next(csv.reader(io.StringIO(text)))

    if pending:
        _logger.warning("unterminated quoted field at end of stream", lines=len(pending))


async def fetch_rows(
    url: str,
    timeout: float = 60.0,
    client: httpx.AsyncClient | None = None,
) -> AsyncIterator[CsvRow]:
    """Stream CSV rows from *url*.

    Raises:
        SourceFetchError: on non-2xx responses, timeouts and transport errors.
    """
    owns_client = client is None
    http = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
    try:
        async with http.stream("GET", url) as response:
            if not response.is_success:
                raise SourceFetchError(url, f"HTTP {response.status_code}")
            _logger.info("source opened", url=url, status_code=response.status_code)
            async for row in iter_csv_rows(response.aiter_lines()):
                yield row
    except httpx.TimeoutException as exc:
        _logger.error("source request timed out", url=url, timeout=timeout)
        raise SourceFetchError(url, "request timed out") from exc
    except httpx.HTTPError as exc:
        _logger.error("source http error", url=url, error=str(exc))
        raise SourceFetchError(url, str(exc)) from exc
    finally:
        if owns_client:
            await http.aclose()


async def _file_lines(path: Path) -> AsyncIterator[str]:
    # Blocking reads; a local file is consumed once per CLI run.
    with path.open(encoding="utf-8", newline="") as handle:
        for line in handle:
            yield line


async def read_rows(path: str | Path) -> AsyncIterator[CsvRow]:
    """Stream CSV rows from a local file."""
    file_path = Path(path)
    try:
        async for row in iter_csv_rows(_file_lines(file_path)):
            yield row
    except OSError as exc:
        _logger.error("source file error", path=str(file_path), error=str(exc))
        raise SourceFetchError(str(file_path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        _logger.error("source file not utf-8", path=str(file_path), error=str(exc))
        raise SourceFetchError(str(file_path), "not valid UTF-8 text") from exc


def open_rows(source: str, timeout: float = 60.0) -> AsyncIterator[CsvRow]:
    """Pick the HTTP or file reader for *source*."""
    if source.startswith(("http://", "https://")):
        return fetch_rows(source, timeout=timeout)
    if source.startswith("file://"):
        return read_rows(source.removeprefix("file://"))
    return read_rows(source)
