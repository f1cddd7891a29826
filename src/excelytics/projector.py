"""
Projection of a dataset onto chart series for a chosen pair of axes.
"""
import logging
from typing import Optional

from .aggregator import aggregate_by
from .classifier import cell_at, cell_label, classify, column_index, numeric_or_zero
from .errors import UnknownColumnError
from .models import (
    ChartDataset,
    ChartFamily,
    ChartSeries,
    ChartType,
    ColumnProfile,
    Dataset,
    SemanticRole,
)

logger = logging.getLogger(__name__)

# Cycled by entry index in categorical and grouped charts.
PALETTE = (
    "rgba(59, 130, 246, 0.8)",
    "rgba(16, 185, 129, 0.8)",
    "rgba(245, 158, 11, 0.8)",
    "rgba(239, 68, 68, 0.8)",
    "rgba(139, 92, 246, 0.8)",
    "rgba(236, 72, 153, 0.8)",
    "rgba(20, 184, 166, 0.8)",
    "rgba(99, 102, 241, 0.8)",
)

SCATTER_COLOR = PALETTE[0]


def palette_colors(count: int) -> tuple:
    return tuple(PALETTE[i % len(PALETTE)] for i in range(count))


def resolve_family(chart_type: ChartType, y_profile: ColumnProfile) -> ChartFamily:
    """A region-like y axis is a grouping axis whatever the chart type."""
    if y_profile.semantic_role is SemanticRole.REGION:
        return ChartFamily.GROUPED
    if chart_type is ChartType.SCATTER:
        return ChartFamily.SCATTER
    return ChartFamily.CATEGORICAL


def _default_value_column(profiles) -> ColumnProfile:
    for profile in profiles:
        if profile.is_numeric and profile.semantic_role is SemanticRole.SALES:
            return profile
    raise UnknownColumnError("No value column given and no numeric sales column to group by")


def _project_categorical(dataset: Dataset, x_index: int, y_index: int) -> ChartSeries:
    x_header = dataset.headers[x_index]
    y_header = dataset.headers[y_index]
    labels = tuple(cell_label(cell_at(row, x_index)) for row in dataset.rows)
    values = tuple(numeric_or_zero(cell_at(row, y_index)) for row in dataset.rows)
    return ChartSeries(
        title=f"{y_header} by {x_header}",
        family=ChartFamily.CATEGORICAL,
        labels=labels,
        datasets=(
            ChartDataset(
                name=y_header,
                values=values,
                color=PALETTE[0],
                point_colors=palette_colors(len(values)),
            ),
        ),
    )


def _project_scatter(dataset: Dataset, x_index: int, y_index: int) -> ChartSeries:
    x_header = dataset.headers[x_index]
    y_header = dataset.headers[y_index]
    coordinates = tuple(
        (numeric_or_zero(cell_at(row, x_index)), numeric_or_zero(cell_at(row, y_index)))
        for row in dataset.rows
    )
    return ChartSeries(
        title=f"{y_header} vs {x_header}",
        family=ChartFamily.SCATTER,
        coordinates=coordinates,
        datasets=(
            ChartDataset(
                name=y_header,
                values=tuple(y for _, y in coordinates),
                color=SCATTER_COLOR,
            ),
        ),
    )


def _project_grouped(dataset: Dataset, group_index: int, value_index: int) -> ChartSeries:
    group_header = dataset.headers[group_index]
    value_header = dataset.headers[value_index]
    totals = aggregate_by(dataset, group_index, value_index)
    return ChartSeries(
        title=f"{value_header} by {group_header}",
        family=ChartFamily.GROUPED,
        labels=tuple(totals.keys()),
        datasets=(
            ChartDataset(
                name=value_header,
                values=tuple(totals.values()),
                color=PALETTE[0],
                point_colors=palette_colors(len(totals)),
            ),
        ),
    )


def project(
    dataset: Dataset,
    x_header: str,
    y_header: str,
    chart_type: ChartType = ChartType.BAR,
    value_header: Optional[str] = None,
) -> ChartSeries:
    """
    Build chart series for the given axes.

    When the y axis is a region/location column the chart groups rows by
    that column and sums ``value_header`` per group. Without an explicit
    value column the first numeric sales/revenue column is used.

    Args:
        dataset: Dataset to project
        x_header: Header of the x axis column
        y_header: Header of the y axis column
        chart_type: Requested chart type
        value_header: Column summed per group for grouped charts

    Returns:
        A new ChartSeries

    Raises:
        UnknownColumnError: If an axis or the value column is not in the dataset
    """
    x_index = column_index(dataset, x_header)
    y_index = column_index(dataset, y_header)
    profiles = classify(dataset)

    family = resolve_family(chart_type, profiles[y_index])
    if family is ChartFamily.GROUPED:
        if value_header is not None:
            value_index = column_index(dataset, value_header)
        else:
            value_index = _default_value_column(profiles).index
            logger.debug(
                "Grouping %r by default value column %r",
                y_header,
                dataset.headers[value_index],
            )
        return _project_grouped(dataset, y_index, value_index)
    if family is ChartFamily.SCATTER:
        return _project_scatter(dataset, x_index, y_index)
    return _project_categorical(dataset, x_index, y_index)
