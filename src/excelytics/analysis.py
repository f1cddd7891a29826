"""
Spreadsheet analysis pipeline.
"""
import logging
from typing import Dict, Optional

from .aggregator import aggregate
from .classifier import classify
from .insights import InsightGenerator, RuleBasedInsightGenerator
from .models import (
    AnalysisResult,
    ColumnStats,
    DataPreview,
    Dataset,
    DatasetSummary,
)
from .parsing import PandasSpreadsheetParser, SpreadsheetParser

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_ROWS = 5


def analyze_dataset(
    dataset: Dataset,
    insight_generator: Optional[InsightGenerator] = None,
    preview_rows: int = DEFAULT_PREVIEW_ROWS,
) -> AnalysisResult:
    """
    Analyze a dataset and return results.

    Args:
        dataset: Parsed spreadsheet
        insight_generator: Source of insight strings, rule-based by default
        preview_rows: Number of rows in each preview slice

    Returns:
        Summary, column profiles, statistics for numeric columns, a data
        preview and insights
    """
    if insight_generator is None:
        insight_generator = RuleBasedInsightGenerator()

    profiles = classify(dataset)

    # Numeric columns always hold at least one value, so aggregate cannot fail here.
    statistics: Dict[str, ColumnStats] = {
        profile.header: aggregate(dataset, profile.index)
        for profile in profiles
        if profile.is_numeric
    }

    rows = [list(row) for row in dataset.rows]
    result = AnalysisResult(
        summary=DatasetSummary(
            total_rows=len(rows),
            total_columns=len(dataset.headers),
            columns=list(dataset.headers),
        ),
        columns=profiles,
        statistics=statistics,
        data_preview=DataPreview(
            first_rows=rows[:preview_rows],
            last_rows=rows[-preview_rows:] if rows else [],
        ),
        insights=insight_generator.generate_insights(dataset),
    )

    logger.info(
        "Analyzed dataset: %d rows, %d numeric columns",
        len(rows),
        len(statistics),
    )
    return result


def analyze_spreadsheet(
    content: bytes,
    filename: str,
    parser: Optional[SpreadsheetParser] = None,
    insight_generator: Optional[InsightGenerator] = None,
    preview_rows: int = DEFAULT_PREVIEW_ROWS,
) -> AnalysisResult:
    """
    Parse an uploaded spreadsheet and analyze it.

    Raises:
        UnsupportedFileError: If the file type is not supported
        SpreadsheetParseError: If the file cannot be decoded
    """
    if parser is None:
        parser = PandasSpreadsheetParser()
    dataset = parser.parse(content, filename)
    return analyze_dataset(dataset, insight_generator=insight_generator, preview_rows=preview_rows)
