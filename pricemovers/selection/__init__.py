"""Bounded selection core for pricemovers.

Keeps the N largest and N smallest price differences of a stream in fixed
memory, sharing one stored copy of each description between both pools.

Submodules:
    pool      -- SelectionPool: fixed-capacity MOST / LEAST retention.
    registry  -- DescriptionRegistry: reference-counted description interning.
    tracker   -- ChangeTracker: dual-pool ingestion with eviction transfer.
"""

from pricemovers.selection.pool import InvalidCapacityError, SelectionPool
from pricemovers.selection.registry import DescriptionRegistry
from pricemovers.selection.tracker import ChangeTracker

__all__ = [
    "ChangeTracker",
    "DescriptionRegistry",
    "InvalidCapacityError",
    "SelectionPool",
]
