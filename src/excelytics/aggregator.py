"""
Column aggregation over a dataset.

Two policies for cells that are empty or not numbers:

- ``aggregate`` and ``numeric_values`` skip them, so ``count`` is the
  number of valid numeric cells.
- ``aggregate_by`` counts them as 0 so grouped totals reconcile with a
  full scan of the column.
"""
from typing import Dict, List

import pandas as pd

from .classifier import cell_at, cell_label, numeric_or_zero, parse_number
from .errors import EmptyColumnError, UnknownColumnError
from .models import ColumnStats, Dataset


def _check_index(dataset: Dataset, column_index: int) -> None:
    if not 0 <= column_index < len(dataset.headers):
        raise UnknownColumnError(
            f"Column index {column_index} out of range for {len(dataset.headers)} columns"
        )


def numeric_values(dataset: Dataset, column_index: int) -> List[float]:
    """Return the valid numeric values of a column in row order."""
    _check_index(dataset, column_index)
    values = []
    for row in dataset.rows:
        value = parse_number(cell_at(row, column_index))
        if value is not None:
            values.append(value)
    return values


def aggregate(dataset: Dataset, column_index: int) -> ColumnStats:
    """
    Compute sum, mean, min, max and count for a numeric column.

    Args:
        dataset: Dataset to read
        column_index: Position of the column in the headers

    Returns:
        Statistics over the column's valid numeric cells

    Raises:
        UnknownColumnError: If the index is out of range
        EmptyColumnError: If the column holds no numeric cells
    """
    series = pd.Series(numeric_values(dataset, column_index), dtype="float64")
    count = len(series)
    if count == 0:
        raise EmptyColumnError(
            f"Column {dataset.headers[column_index]!r} has no numeric values"
        )

    total = float(series.sum())
    return ColumnStats(
        sum=total,
        mean=total / count,
        min=float(series.min()),
        max=float(series.max()),
        count=count,
    )


def aggregate_by(dataset: Dataset, group_index: int, value_index: int) -> Dict[str, float]:
    """
    Sum a value column per distinct group value.

    Keys are the group cells as labels, case preserved, in order of first
    appearance. Non-numeric and empty values contribute 0.
    """
    _check_index(dataset, group_index)
    _check_index(dataset, value_index)

    totals: Dict[str, float] = {}
    for row in dataset.rows:
        key = cell_label(cell_at(row, group_index))
        totals[key] = totals.get(key, 0.0) + numeric_or_zero(cell_at(row, value_index))
    return totals
