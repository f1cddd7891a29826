import pytest

from excelytics.aggregator import aggregate, aggregate_by, numeric_values
from excelytics.errors import EmptyColumnError, UnknownColumnError
from excelytics.models import ColumnStats, Dataset


def test_aggregate_numeric_column():
    dataset = Dataset(headers=("Sales",), rows=[(10,), (20,), (30,)])

    assert aggregate(dataset, 0) == ColumnStats(sum=60, mean=20, min=10, max=30, count=3)


def test_aggregate_skips_empty_and_non_numeric_cells():
    dataset = Dataset(headers=("Sales",), rows=[("4",), ("",), ("n/a",), (None,), (-2,)])

    stats = aggregate(dataset, 0)

    assert stats.count == 2
    assert stats.sum == 2
    assert stats.mean == 1
    assert stats.min == -2
    assert stats.max == 4


def test_aggregate_all_empty_column_raises():
    dataset = Dataset(headers=("Sales",), rows=[("",), (None,)])
    with pytest.raises(EmptyColumnError):
        aggregate(dataset, 0)


def test_aggregate_out_of_range_column_raises(monthly_sales):
    with pytest.raises(UnknownColumnError):
        aggregate(monthly_sales, 4)
    with pytest.raises(UnknownColumnError):
        aggregate(monthly_sales, -1)


def test_numeric_values_keep_row_order():
    dataset = Dataset(headers=("Sales",), rows=[(3,), ("x",), ("1.5",), (2,)])
    assert numeric_values(dataset, 0) == [3.0, 1.5, 2.0]


def test_aggregate_by_first_appearance_order():
    dataset = Dataset(
        headers=("Region", "Sales"),
        rows=[("North", 10), ("South", 5), ("North", 7)],
    )

    totals = aggregate_by(dataset, 0, 1)

    assert totals == {"North": 17, "South": 5}
    assert list(totals) == ["North", "South"]


def test_aggregate_by_counts_missing_values_as_zero():
    dataset = Dataset(
        headers=("Region", "Sales"),
        rows=[("west", "n/a"), ("West", 3), ("west", None), ("East",)],
    )

    totals = aggregate_by(dataset, 0, 1)

    assert totals == {"west": 0, "West": 3, "East": 0}


def test_aggregate_by_reconciles_with_column_total(monthly_sales):
    totals = aggregate_by(monthly_sales, 1, 2)

    assert list(totals.items()) == [("North", 740), ("South", 675), ("East", 490)]
    assert sum(totals.values()) == aggregate(monthly_sales, 2).sum
