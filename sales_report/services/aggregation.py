from __future__ import annotations

from collections.abc import Iterable

from ..excel.extractor import parse_lenient
from ..models.item import Item
from ..models.raw_row import RawRow
from .priority import PriorityTable

"""Aggregation engine: fold RawRows into per-name Items and rank them.

Grouping key is the exact item name ("Latte" and "latte " are two groups).
Ranking: priority items first, then descending sum, then name ascending so
equal sums always come out in the same order.
"""

__all__ = [
    "ItemAccumulator",
    "aggregate",
    "rank_items",
    "ranking_key",
]


class _Totals:
    __slots__ = ("name", "quantity", "sum", "is_priority")

    def __init__(self, name: str, is_priority: bool) -> None:
        self.name = name
        self.quantity = 0.0
        self.sum = 0.0
        self.is_priority = is_priority


class ItemAccumulator:
    """Per-run accumulator of item totals.

    One instance per analysis run; nothing is shared between runs except the
    (immutable) priority table.
    """

    def __init__(self, priority_table: PriorityTable) -> None:
        self.priority_table = priority_table
        self._totals: dict[str, _Totals] = {}
        self.rows_folded = 0

    def add(self, name: str, quantity: float, amount: float) -> None:
        """Add one row's contribution to the group of ``name``."""
        totals = self._totals.get(name)
        if totals is None:
            # Priority flag is fixed on first occurrence
            totals = _Totals(name, self.priority_table.is_priority(name))
            self._totals[name] = totals
        totals.quantity += quantity
        totals.sum += amount
        self.rows_folded += 1

    def add_row(self, row: RawRow) -> None:
        self.add(row.name, parse_lenient(row.quantity), parse_lenient(row.amount))

    def __len__(self) -> int:
        return len(self._totals)

    def items(self) -> list[Item]:
        """Finalized Items in first-occurrence order."""
        return [
            Item(name=t.name, quantity=t.quantity, sum=t.sum, is_priority=t.is_priority)
            for t in self._totals.values()
        ]


def aggregate(rows: Iterable[RawRow], priority_table: PriorityTable) -> list[Item]:
    """Fold rows into one Item per distinct name.

    Args:
        rows: Extracted data rows
        priority_table: Table deciding the priority flag of each new name

    Returns:
        Items in first-occurrence order (not ranked)
    """
    acc = ItemAccumulator(priority_table)
    for row in rows:
        acc.add_row(row)
    return acc.items()


def ranking_key(item: Item) -> tuple[bool, float, str]:
    return (not item.is_priority, -item.sum, item.name)


def rank_items(items: Iterable[Item]) -> list[Item]:
    """Return items sorted priority first, then by descending sum, then name."""
    return sorted(items, key=ranking_key)
