from __future__ import annotations

import random

import pytest

from sales_report.models.item import Item
from sales_report.models.raw_row import RawRow
from sales_report.services.aggregation import ItemAccumulator, aggregate, rank_items
from sales_report.services.priority import PriorityTable


def _row(name: str, qty: str, amount: str) -> RawRow:
    return RawRow(name=name, quantity=qty, amount=amount)


@pytest.fixture()
def table() -> PriorityTable:
    return PriorityTable.default()


def test_grouping_key_is_exact_name(table):
    rows = [_row("Latte", "2", "50"), _row("latte", "1", "25"), _row("Latte ", "1", "25")]
    items = {i.name: i for i in aggregate(rows, table)}
    assert set(items) == {"Latte", "latte", "Latte "}
    assert items["Latte"] == Item(name="Latte", quantity=2.0, sum=50.0, is_priority=True)
    assert items["latte"].is_priority and items["Latte "].is_priority


def test_accumulation_is_additive(table):
    rows = [
        _row("Croissant", "1", "20"),
        _row("Croissant", "2", "40,50"),
        _row("Croissant", "0,5", "10"),
    ]
    (item,) = aggregate(rows, table)
    assert item.quantity == pytest.approx(3.5)
    assert item.sum == pytest.approx(70.5)
    assert item.is_priority is False


def test_unparsable_quantity_counts_zero_but_amount_still_added(table):
    rows = [_row("Tea", "abc", "15"), _row("Tea", "1", "")]
    (item,) = aggregate(rows, table)
    assert item.quantity == 1.0
    assert item.sum == 15.0


def test_per_name_sums_match_input_in_any_order(table):
    rows = [_row(f"item{i % 7}", str(i % 3), f"{i},25") for i in range(60)]
    expected: dict[str, float] = {}
    for r in rows:
        expected[r.name] = expected.get(r.name, 0.0) + float(r.amount.replace(",", "."))

    shuffled = rows[:]
    random.Random(7).shuffle(shuffled)
    for variant in (rows, shuffled):
        got = {i.name: i.sum for i in aggregate(variant, table)}
        assert got.keys() == expected.keys()
        for name, total in expected.items():
            assert got[name] == pytest.approx(total)
    ranked_names = [i.name for i in rank_items(aggregate(rows, table))]
    assert ranked_names == [i.name for i in rank_items(aggregate(shuffled, table))]


def test_accumulator_tracks_rows_and_groups(table):
    acc = ItemAccumulator(table)
    acc.add("Latte", 1.0, 25.0)
    acc.add("Latte", 1.0, 25.0)
    acc.add("Bagel", 1.0, 30.0)
    assert acc.rows_folded == 3
    assert len(acc) == 2
    assert [i.name for i in acc.items()] == ["Latte", "Bagel"]


def test_priority_flag_fixed_at_first_occurrence():
    table = PriorityTable.from_names(["latte"])
    acc = ItemAccumulator(table)
    acc.add("Latte", 1.0, 1.0)
    (item,) = acc.items()
    assert item.is_priority is True


def test_rank_priority_first_then_sum_desc():
    items = [
        Item("Croissant", 4, 80.0, False),
        Item("latte", 1, 25.0, True),
        Item("Bagel", 1, 90.0, False),
        Item("Latte", 2, 50.0, True),
    ]
    ranked = rank_items(items)
    assert [i.name for i in ranked] == ["Latte", "latte", "Bagel", "Croissant"]


def test_rank_total_order_holds_for_every_pair():
    rng = random.Random(3)
    items = [Item(f"n{i}", 1, float(rng.randint(0, 20)), rng.random() < 0.4) for i in range(50)]
    ranked = rank_items(items)
    for i, a in enumerate(ranked):
        for b in ranked[i + 1:]:
            if a.is_priority != b.is_priority:
                assert a.is_priority
            else:
                assert a.sum >= b.sum


def test_rank_ties_broken_by_name():
    items = [Item("Tea", 1, 10.0, True), Item("Cacao", 1, 10.0, True), Item("Espresso", 1, 10.0, True)]
    assert [i.name for i in rank_items(items)] == ["Cacao", "Espresso", "Tea"]
    assert [i.name for i in rank_items(reversed(items))] == ["Cacao", "Espresso", "Tea"]


def test_empty_input(table):
    assert aggregate([], table) == []
    assert rank_items([]) == []
