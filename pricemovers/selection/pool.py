"""Fixed-capacity pool retaining the K largest or K smallest differences.

Keys are kept in a sorted list alongside the difference -> code mapping, so
the retained bounds are always the first and last keys and eviction removes
exactly one extremal entry.
"""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterator
from decimal import Decimal

from pricemovers.models.records import PoolEntry, PoolMode


class InvalidCapacityError(ValueError):
    """Raised when a pool is constructed with a capacity below one."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Pool capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity


class SelectionPool:
    """Retains the ``capacity`` most extreme differences for one polarity.

    A ``PoolMode.MOST`` pool keeps the largest differences and evicts its
    smallest entry on overflow; a ``PoolMode.LEAST`` pool keeps the smallest
    and evicts its largest.  Differences are unique keys: re-inserting a
    retained difference only updates its description code.
    """

    def __init__(self, capacity: int, mode: PoolMode) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidCapacityError(capacity)
        self._capacity = capacity
        self._mode = mode
        self._entries: dict[Decimal, int] = {}
        # Ascending; mirrors the keys of _entries.
        self._keys: list[Decimal] = []
        self._cached_min: Decimal | None = None
        self._cached_max: Decimal | None = None

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def mode(self) -> PoolMode:
        return self._mode

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self._capacity

    @property
    def lowest(self) -> Decimal | None:
        """Smallest retained difference, or None when empty."""
        return self._keys[0] if self._keys else None

    @property
    def highest(self) -> Decimal | None:
        """Largest retained difference, or None when empty."""
        return self._keys[-1] if self._keys else None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, difference: object) -> bool:
        return difference in self._entries

    def _snapshot(self) -> list[PoolEntry]:
        return [PoolEntry(key, self._entries[key]) for key in self._keys]

    def __iter__(self) -> Iterator[PoolEntry]:
        """Iterate entries in ascending difference order, as of this call."""
        return iter(self._snapshot())

    def __reversed__(self) -> Iterator[PoolEntry]:
        """Iterate entries in descending difference order, as of this call."""
        return reversed(self._snapshot())

    def __repr__(self) -> str:
        return f"SelectionPool(capacity={self._capacity}, mode={self._mode.value}, size={len(self)})"

    def get(self, difference: Decimal) -> int | None:
        """Return the description code stored for *difference*, if retained."""
        return self._entries.get(difference)

    def entries(self, descending: bool = False) -> list[PoolEntry]:
        """Snapshot of the retained entries in ascending (or descending) order."""
        snapshot = self._snapshot()
        return snapshot[::-1] if descending else snapshot

    def fits(self, value: Decimal) -> bool:
        """Return True if *value* would be accepted by ``insert``.

        Below capacity everything fits.  Once full, a value fits when it
        beats the pool's outer bound or lies within ``[min, max]``; the
        inclusive range lets a duplicate difference reach ``insert`` so its
        code can be updated.
        """
        if len(self._entries) < self._capacity:
            return True
        assert self._cached_min is not None and self._cached_max is not None
        if self._mode is PoolMode.MOST and value > self._cached_max:
            return True
        if self._mode is PoolMode.LEAST and value < self._cached_min:
            return True
        return self._cached_min <= value <= self._cached_max

    def insert(self, value: Decimal, code: int) -> PoolEntry | None:
        """Insert *value* tagged with *code*.

        Returns the evicted entry when a genuinely new difference pushed the
        pool over capacity, otherwise None.  Values that do not fit and
        identical re-insertions are ignored.
        """
        if not self.fits(value):
            return None

        current = self._entries.get(value)
        if current == code:
            return None
        if current is not None:
            # Same difference, new description: no structural change.
            self._entries[value] = code
            return None

        self._entries[value] = code
        insort(self._keys, value)

        evicted: PoolEntry | None = None
        if len(self._entries) > self._capacity:
            victim = self._keys.pop(0) if self._mode is PoolMode.MOST else self._keys.pop()
            evicted = PoolEntry(victim, self._entries.pop(victim))

        if len(self._entries) == self._capacity:
            self._refresh_bounds()
        return evicted

    def _refresh_bounds(self) -> None:
        self._cached_min = self._keys[0]
        self._cached_max = self._keys[-1]
