import math

import pytest

from excelytics.errors import UnknownColumnError
from excelytics.models import ChartFamily, ChartType, Dataset
from excelytics.projector import PALETTE, SCATTER_COLOR, project


def test_palette_is_eight_distinct_colors():
    assert len(PALETTE) == 8
    assert len(set(PALETTE)) == 8


def test_categorical_projection(monthly_sales):
    series = project(monthly_sales, "Month", "Sales ($)")

    assert series.family is ChartFamily.CATEGORICAL
    assert series.title == "Sales ($) by Month"
    assert series.labels == tuple(row[0] for row in monthly_sales.rows)
    assert len(series.datasets) == 1

    dataset = series.datasets[0]
    assert dataset.name == "Sales ($)"
    assert len(dataset.values) == 12
    assert dataset.values[:3] == (100.0, 120.0, 90.0)
    assert dataset.point_colors[0] == PALETTE[0]
    assert dataset.point_colors[8] == PALETTE[0]
    assert dataset.point_colors[11] == PALETTE[3]
    assert series.coordinates == ()


def test_categorical_projection_coerces_non_numeric_to_zero():
    dataset = Dataset(
        headers=("Month", "Sales"),
        rows=[("Jan", 10), ("Feb", "n/a"), ("Mar", None), ("Apr",)],
    )

    series = project(dataset, "Month", "Sales", ChartType.LINE)

    values = series.datasets[0].values
    assert values == (10.0, 0.0, 0.0, 0.0)
    assert not any(math.isnan(v) for v in values)


@pytest.mark.parametrize("chart_type", [ChartType.BAR, ChartType.LINE, ChartType.PIE, ChartType.DOUGHNUT])
def test_non_scatter_types_are_categorical(monthly_sales, chart_type):
    series = project(monthly_sales, "Month", "Customers", chart_type)
    assert series.family is ChartFamily.CATEGORICAL


def test_scatter_projection_keeps_every_row():
    dataset = Dataset(
        headers=("Customers", "Sales"),
        rows=[(45, 100), ("", 120), (40, "n/a"), (61, 130)],
    )

    series = project(dataset, "Customers", "Sales", ChartType.SCATTER)

    assert series.family is ChartFamily.SCATTER
    assert series.title == "Sales vs Customers"
    assert series.coordinates == ((45.0, 100.0), (0.0, 120.0), (40.0, 0.0), (61.0, 130.0))
    assert series.labels == ()
    assert series.datasets[0].color == SCATTER_COLOR
    assert series.datasets[0].values == (100.0, 120.0, 0.0, 130.0)


def test_region_y_axis_groups_by_region(monthly_sales):
    series = project(monthly_sales, "Month", "Region")

    assert series.family is ChartFamily.GROUPED
    assert series.title == "Sales ($) by Region"
    assert series.labels == ("North", "South", "East")
    assert series.datasets[0].name == "Sales ($)"
    assert series.datasets[0].values == (740.0, 675.0, 490.0)
    assert series.datasets[0].point_colors == PALETTE[:3]


def test_grouped_projection_with_explicit_value_column(monthly_sales):
    series = project(monthly_sales, "Month", "Region", ChartType.SCATTER, value_header="Customers")

    assert series.family is ChartFamily.GROUPED
    assert series.datasets[0].name == "Customers"
    assert series.datasets[0].values == (324.0, 295.0, 219.0)


def test_grouped_projection_without_value_column_raises():
    dataset = Dataset(headers=("Month", "Location", "Units"), rows=[("Jan", "Paris", 3)])
    with pytest.raises(UnknownColumnError):
        project(dataset, "Month", "Location")


def test_unknown_axis_raises(monthly_sales):
    with pytest.raises(UnknownColumnError):
        project(monthly_sales, "Week", "Sales ($)")
    with pytest.raises(UnknownColumnError):
        project(monthly_sales, "Month", "Profit")
    with pytest.raises(UnknownColumnError):
        project(monthly_sales, "Month", "Region", value_header="Profit")


def test_projection_is_deterministic(monthly_sales):
    first = project(monthly_sales, "Month", "Sales ($)", ChartType.PIE)
    second = project(monthly_sales, "Month", "Sales ($)", ChartType.PIE)

    assert first == second
    assert first is not second


def test_projection_of_empty_dataset():
    series = project(Dataset(headers=("Month", "Sales")), "Month", "Sales")

    assert series.labels == ()
    assert series.datasets[0].values == ()
