from __future__ import annotations

from dataclasses import dataclass

"""Item model: the aggregation unit of a sales report.

An Item is keyed by the exact item name. The priority flag is computed once when
the name is first seen and never changes afterwards.
"""

__all__ = [
    "Item",
]


@dataclass(frozen=True)
class Item:
    """Finalized per-name totals of one analysis run."""
    name: str  # Exact (non-normalized) item name
    quantity: float  # Sum of all matching rows' quantities
    sum: float  # Sum of all matching rows' amounts
    is_priority: bool = False  # From the priority table, fixed at creation
