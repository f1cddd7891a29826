"""
Column classification: numeric detection and semantic roles from header names.
"""
import math
import re
from typing import List, Optional, Sequence

from .errors import UnknownColumnError
from .models import Cell, ColumnProfile, Dataset, SemanticRole

# Plain base-10 integers and decimals; no exponents, separators or symbols.
_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")

# Checked in order; the first role with a matching keyword wins.
ROLE_KEYWORDS = (
    (SemanticRole.REGION, ("region", "location")),
    (SemanticRole.SALES, ("sales", "revenue")),
)


def is_empty(cell: Cell) -> bool:
    """Return True for missing cells and whitespace-only strings."""
    if cell is None:
        return True
    return isinstance(cell, str) and not cell.strip()


def parse_number(cell: Cell) -> Optional[float]:
    """
    Parse a cell as a finite number.

    Args:
        cell: Raw cell value

    Returns:
        The numeric value, or None if the cell is empty or not a number
    """
    if isinstance(cell, bool):
        return None
    if isinstance(cell, (int, float)):
        value = float(cell)
        return value if math.isfinite(value) else None
    if isinstance(cell, str):
        text = cell.strip()
        if _NUMBER_PATTERN.match(text):
            return float(text)
    return None


def numeric_or_zero(cell: Cell) -> float:
    value = parse_number(cell)
    return 0.0 if value is None else value


def cell_at(row: Sequence[Cell], index: int) -> Cell:
    """Return the cell at index, treating cells past the end of a short row as empty."""
    if index < len(row):
        return row[index]
    return None


def cell_label(cell: Cell) -> str:
    """Stringify a cell for use as a chart label or group key."""
    if cell is None:
        return ""
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell)


def column_index(dataset: Dataset, header: str) -> int:
    try:
        return dataset.headers.index(header)
    except ValueError:
        raise UnknownColumnError(f"Column {header!r} not found in dataset") from None


def semantic_role(header: str) -> SemanticRole:
    lowered = header.lower()
    for role, keywords in ROLE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return role
    return SemanticRole.NONE


def _is_numeric_column(dataset: Dataset, index: int) -> bool:
    seen_value = False
    for row in dataset.rows:
        cell = cell_at(row, index)
        if is_empty(cell):
            continue
        if parse_number(cell) is None:
            return False
        seen_value = True
    return seen_value


def classify(dataset: Dataset) -> List[ColumnProfile]:
    """
    Profile every column of a dataset.

    A column is numeric when it has at least one non-empty cell and every
    non-empty cell parses as a number. Roles come from case-insensitive
    substring matches on the header; region keywords take precedence over
    sales keywords, so "Region Sales" is a region column.

    Args:
        dataset: Dataset to inspect

    Returns:
        One profile per header, in header order
    """
    return [
        ColumnProfile(
            index=index,
            header=header,
            is_numeric=_is_numeric_column(dataset, index),
            semantic_role=semantic_role(header),
        )
        for index, header in enumerate(dataset.headers)
    ]
