"""
Insight generation for uploaded datasets.

Callers depend on the ``InsightGenerator`` protocol and inject an
implementation. ``RuleBasedInsightGenerator`` derives its text from column
roles, aggregates and the sales trend; a model-backed generator can be
dropped in behind the same protocol.
"""
import logging
import math
from typing import List, Optional, Protocol

from .aggregator import aggregate, numeric_values
from .classifier import cell_at, cell_label, classify, is_empty
from .errors import InsufficientDataError
from .models import (
    ColumnProfile,
    Dataset,
    QuickAnalysis,
    QuickAnalysisSummary,
    SemanticRole,
    Trend,
)
from .trend import detect_trend

logger = logging.getLogger(__name__)

DEFAULT_QUALITY_THRESHOLD = 90.0

CHART_SUGGESTIONS = [
    "Bar chart for regional comparison",
    "Line chart for trend analysis",
    "Pie chart for category distribution",
]

TREND_MESSAGES = {
    Trend.UPWARD: (
        "Upward trend detected in {column}",
        "Continue current strategies to maintain growth momentum",
    ),
    Trend.DOWNWARD: (
        "Declining trend detected in {column}",
        "Investigate factors causing decline and implement corrective measures",
    ),
    Trend.STABLE: (
        "Stable {column} pattern observed",
        "Consider strategies to drive growth and avoid stagnation",
    ),
}


class InsightGenerator(Protocol):
    def generate_insights(self, dataset: Dataset) -> List[str]:
        ...


def format_number(value: float) -> str:
    """Format with thousands separators, dropping a zero fractional part."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def data_quality(dataset: Dataset) -> float:
    """Percentage of rows that have at least one non-empty cell."""
    total = len(dataset.rows)
    if total == 0:
        return 0.0
    empty_rows = sum(1 for row in dataset.rows if all(is_empty(cell) for cell in row))
    return (total - empty_rows) / total * 100


def _first_with_role(profiles: List[ColumnProfile], role: SemanticRole, numeric: bool = False) -> Optional[ColumnProfile]:
    for profile in profiles:
        if profile.semantic_role is role and (profile.is_numeric or not numeric):
            return profile
    return None


class RuleBasedInsightGenerator:
    """Quick analysis built from column heuristics only."""

    def __init__(self, quality_threshold: float = DEFAULT_QUALITY_THRESHOLD):
        self.quality_threshold = quality_threshold

    def generate_insights(self, dataset: Dataset) -> List[str]:
        analysis = self.quick_analysis(dataset)
        return analysis.insights + analysis.trends

    def quick_analysis(self, dataset: Dataset) -> QuickAnalysis:
        profiles = classify(dataset)
        numeric_columns = [p for p in profiles if p.is_numeric]

        insights: List[str] = []
        trends: List[str] = []
        recommendations: List[str] = []

        sales = _first_with_role(profiles, SemanticRole.SALES, numeric=True)
        if sales:
            self._sales_insights(dataset, sales, insights, trends, recommendations)

        quality = round_half_up(data_quality(dataset))
        insights.append(f"Data Quality Score: {quality}%")
        if quality < self.quality_threshold:
            recommendations.append("Consider data cleaning to improve analysis accuracy")

        region = _first_with_role(profiles, SemanticRole.REGION)
        if region:
            cells = (cell_at(row, region.index) for row in dataset.rows)
            distinct = {cell_label(cell) for cell in cells if not is_empty(cell)}
            trends.append(f"Analysis covers {len(distinct)} different regions/locations")
            if len(distinct) > 1:
                recommendations.append(
                    "Consider regional performance comparison for targeted strategies"
                )

        logger.info(
            "Quick analysis: %d rows, %d numeric columns, quality %d%%",
            len(dataset.rows),
            len(numeric_columns),
            quality,
        )
        return QuickAnalysis(
            summary=QuickAnalysisSummary(
                total_records=len(dataset.rows),
                data_quality=quality,
                numeric_columns=len(numeric_columns),
                completeness=f"{quality}%",
            ),
            insights=insights,
            trends=trends,
            recommendations=recommendations,
            chart_suggestions=list(CHART_SUGGESTIONS),
        )

    def _sales_insights(self, dataset, sales, insights, trends, recommendations):
        column = sales.header
        stats = aggregate(dataset, sales.index)
        insights.append(f"Total {column}: ${format_number(stats.sum)}")
        insights.append(f"Average {column}: ${format_number(round_half_up(stats.mean))}")
        insights.append(f"Peak {column}: ${format_number(stats.max)}")

        try:
            trend = detect_trend(numeric_values(dataset, sales.index))
        except InsufficientDataError:
            return
        trend_text, recommendation = TREND_MESSAGES[trend]
        trends.append(trend_text.format(column=column))
        recommendations.append(recommendation)
