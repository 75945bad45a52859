"""ChangeTracker: the top-N / bottom-N price change store.

Composes a MOST pool, a LEAST pool and a DescriptionRegistry.  Each recorded
difference is offered to the MOST pool first and to the LEAST pool only if
the MOST pool rejects it.  An entry evicted from one pool is offered once to
the opposite pool; if it does not fit there its description reference is
released.

Reference accounting: every retained entry owns exactly one reference on
its description code, so the registry's total reference count always equals
``len(most) + len(least)``.
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal

from pricemovers.models.records import PoolEntry, PoolMode, as_decimal, exact_difference
from pricemovers.observability.logging import get_logger
from pricemovers.selection.pool import SelectionPool
from pricemovers.selection.registry import DescriptionRegistry

_logger = get_logger("selection.tracker")


class ChangeTracker:
    """Tracks the ``capacity`` largest and smallest differences of a stream.

    Not thread-safe: ``record`` must be called from one logical sequence.
    Contents are valid and queryable between any two ``record`` calls.
    """

    def __init__(self, capacity: int) -> None:
        self._most = SelectionPool(capacity, PoolMode.MOST)
        self._least = SelectionPool(capacity, PoolMode.LEAST)
        self._registry = DescriptionRegistry()

    @property
    def capacity(self) -> int:
        return self._most.capacity

    @property
    def most(self) -> SelectionPool:
        return self._most

    @property
    def least(self) -> SelectionPool:
        return self._least

    @property
    def registry(self) -> DescriptionRegistry:
        return self._registry

    def record(
        self,
        description: str,
        start: Decimal | int | str,
        end: Decimal | int | str,
    ) -> PoolMode | None:
        """Offer ``end - start`` for *description* to the pools.

        Returns the mode of the pool that accepted the difference, or None
        when neither pool wanted it (in which case nothing is interned).
        """
        difference = exact_difference(as_decimal(start), as_decimal(end))

        for pool, other in ((self._most, self._least), (self._least, self._most)):
            if not pool.fits(difference):
                continue
            code = self._registry.intern(description)
            evicted = self._place(pool, difference, code)
            if evicted is not None:
                self._transfer(evicted, other)
            return pool.mode
        return None

    def lookup_description(self, code: int) -> str | None:
        return self._registry.lookup(code)

    def increases(self) -> Iterator[tuple[Decimal, str]]:
        """Yield ``(difference, description)`` from the MOST pool, largest first."""
        return self._resolve(reversed(self._most))

    def decreases(self) -> Iterator[tuple[Decimal, str]]:
        """Yield ``(difference, description)`` from the LEAST pool, smallest first."""
        return self._resolve(iter(self._least))

    def _resolve(self, entries: Iterator[PoolEntry]) -> Iterator[tuple[Decimal, str]]:
        for difference, code in entries:
            description = self._registry.lookup(code)
            if description is not None:
                yield difference, description

    def _place(self, pool: SelectionPool, difference: Decimal, code: int) -> PoolEntry | None:
        """Insert an entry whose reference on *code* the caller already holds.

        If *difference* is already retained, the existing entry's reference
        is released first: either it is the same code (the new reference is
        redundant) or the description is being replaced.
        """
        previous = pool.get(difference)
        if previous is not None:
            self._registry.release(previous)
        return pool.insert(difference, code)

    def _transfer(self, evicted: PoolEntry, target: SelectionPool) -> None:
        """Hand an evicted entry, and its reference, to the opposite pool."""
        if not target.fits(evicted.difference):
            _logger.debug(
                "entry dropped",
                difference=str(evicted.difference),
                code=evicted.code,
            )
            self._registry.release(evicted.code)
            return

        _logger.debug(
            "entry transferred",
            difference=str(evicted.difference),
            code=evicted.code,
            target=target.mode.value,
        )
        displaced = self._place(target, evicted.difference, evicted.code)
        if displaced is not None:
            # No further cascading.
            self._registry.release(displaced.code)
