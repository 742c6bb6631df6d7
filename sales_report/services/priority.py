from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

"""Priority item classification.

A PriorityTable is built once at start-up and only read afterwards, so
concurrent analysis runs can share one instance. Lookup normalizes the name
(strip + lower); grouping in the aggregation engine does not.
"""

__all__ = [
    "DEFAULT_PRIORITY_ITEMS",
    "PriorityTable",
    "normalize_name",
]

DEFAULT_PRIORITY_ITEMS: tuple[str, ...] = (
    "espresso",
    "double espresso decaffeinated",
    "chocolate truffle",
    "sakura latte",
    "matcha latte",
    "berry raf",
    "kakao banana",
    "masala tea latte",
    "cheese & orange latte",
    "double cappuccino vegan",
    "flat white",
    "flat white decaffeinated",
    "flat white vegan",
    "latte",
    "latte decaffeinated",
    "latte vegan",
    "ice latte",
    "ice latte decaffeinated",
    "espresso decaffeinated",
    "ice latte vegan",
    "espresso tonic",
    "espresso tonic decaffeinated",
    "bumblebee",
    "tea",
    "doppio(double espresso)",
    "americano",
    "americano decaffeinated",
    "cappuccino",
    "cappuccino decaffeinated",
    "cacao",
    "hot chocolate",
    "cappuccino vegan",
    "double americano",
    "double cappuccino",
)


def normalize_name(name: str) -> str:
    return name.strip().lower()


@dataclass(frozen=True)
class PriorityTable:
    """Immutable set of normalized priority item names."""
    names: frozenset[str]

    @classmethod
    def from_names(cls, names: Iterable[str]) -> PriorityTable:
        return cls(frozenset(normalize_name(n) for n in names if n.strip()))

    @classmethod
    def default(cls) -> PriorityTable:
        return cls.from_names(DEFAULT_PRIORITY_ITEMS)

    def is_priority(self, name: str) -> bool:
        return normalize_name(name) in self.names

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_priority(name)

    def __len__(self) -> int:
        return len(self.names)
