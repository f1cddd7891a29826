import pytest

from excelytics.models import Dataset

MONTHLY_SALES_ROWS = [
    ("Jan", "North", 100, 45),
    ("Feb", "South", 120, 52),
    ("Mar", "North", 90, 40),
    ("Apr", "East", 130, 61),
    ("May", "South", 150, 68),
    ("Jun", "North", 160, 70),
    ("Jul", "East", 170, 75),
    ("Aug", "North", 180, 79),
    ("Sep", "South", 175, 77),
    ("Oct", "East", 190, 83),
    ("Nov", "North", 210, 90),
    ("Dec", "South", 230, 98),
]


@pytest.fixture
def monthly_sales() -> Dataset:
    return Dataset(
        headers=("Month", "Region", "Sales ($)", "Customers"),
        rows=MONTHLY_SALES_ROWS,
    )


@pytest.fixture
def monthly_sales_csv() -> bytes:
    lines = ["Month,Region,Sales ($),Customers"]
    lines += [",".join(str(cell) for cell in row) for row in MONTHLY_SALES_ROWS]
    return ("\n".join(lines) + "\n").encode("utf-8")
