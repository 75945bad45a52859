"""Shared fixtures for pricemovers integration tests.

Builds NADAC-shaped CSV payloads and httpx mock transports so the full
pipeline (stream -> parse -> filter -> track -> render) runs without
touching the network.
"""

from __future__ import annotations

import random
from collections.abc import Callable

import httpx
import pytest

_HEADER = (
    "NDC Description,NDC,Old NADAC Per Unit,New NADAC Per Unit,Classification for Rate Setting,"
    "Percent Change,Primary Reason,Start Date,End Date,Effective Date"
)

SOURCE_URL = "https://example.test/nadac-comparison.csv"


# ---------------------------------------------------------------------------
# CSV factory helpers
# ---------------------------------------------------------------------------


def make_row(
    description: str,
    old_price: str,
    new_price: str,
    effective_date: str = "06/01/2020",
    ndc: str = "00000000000",
) -> str:
    """Create one CSV line in the NADAC comparison layout."""
    quoted = f'"{description}"' if "," in description else description
    return f"{quoted},{ndc},{old_price},{new_price},G,0,Other,01/01/2020,12/31/2020,{effective_date}"


def make_csv(rows: list[str]) -> str:
    return "\n".join([_HEADER, *rows]) + "\n"


def make_random_rows(count: int, seed: int = 7, year: int = 2020) -> list[tuple[str, str, str, str]]:
    """Deterministic pseudo-random ``(description, old, new, date)`` tuples."""
    rng = random.Random(seed)
    rows = []
    for i in range(count):
        old = rng.randint(1, 100_000)
        new = rng.randint(1, 100_000)
        month = rng.randint(1, 12)
        row_year = year if rng.random() < 0.8 else year - 1
        rows.append(
            (
                f"DRUG {i % 97}",
                f"{old // 100}.{old % 100:02d}",
                f"{new // 100}.{new % 100:02d}",
                f"{month:02d}/15/{row_year}",
            )
        )
    return rows


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_csv() -> str:
    return make_csv(
        [
            make_row("ASPIRIN 81 MG TABLET", "0.02", "0.03"),
            make_row("IBUPROFEN, 200 MG", "0.10", "0.05"),
            make_row("METFORMIN 500 MG", "0.05", "0.25"),
            make_row("ATORVASTATIN 10 MG", "0.40", "0.10"),
            make_row("ATORVASTATIN 10 MG", "1.40", "1.10", effective_date="09/01/2020"),
            make_row("LISINOPRIL 10 MG", "0.03", "0.04", effective_date="03/01/2019"),
            make_row("UNDATED", "0.03", "9.99", effective_date=""),
        ]
    )


@pytest.fixture
def mock_client_factory() -> Callable[[str, int], httpx.AsyncClient]:
    """Return a factory building AsyncClients that serve a fixed CSV body."""

    def _factory(body: str, status_code: int = 200) -> httpx.AsyncClient:
        transport = httpx.MockTransport(lambda request: httpx.Response(status_code, text=body))
        return httpx.AsyncClient(transport=transport)

    return _factory
