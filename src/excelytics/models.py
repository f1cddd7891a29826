"""
Pydantic models for datasets, analysis results and chart series.
"""
from enum import Enum
from typing import Dict, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Cell = Union[int, float, str, None]


# Dataset models
class Dataset(BaseModel):
    """Rectangular table of cells as produced by a spreadsheet parser.

    Rows are expected to have one cell per header. Ragged rows are kept
    as-is; readers treat a missing cell as empty.
    """

    model_config = ConfigDict(frozen=True)

    headers: Tuple[str, ...]
    rows: Tuple[Tuple[Cell, ...], ...] = ()

    @field_validator("headers")
    @classmethod
    def headers_must_be_unique(cls, headers: Tuple[str, ...]) -> Tuple[str, ...]:
        seen = set()
        for header in headers:
            if header in seen:
                raise ValueError(f"Duplicate header: {header!r}")
            seen.add(header)
        return headers


class SemanticRole(str, Enum):
    NONE = "none"
    REGION = "region"
    SALES = "sales"


class ColumnProfile(BaseModel):
    """Derived description of a single column."""

    model_config = ConfigDict(frozen=True)

    index: int
    header: str
    is_numeric: bool
    semantic_role: SemanticRole = SemanticRole.NONE


class ColumnStats(BaseModel):
    """Summary statistics over the numeric cells of a column."""

    model_config = ConfigDict(frozen=True)

    sum: float
    mean: float
    min: float
    max: float
    count: int


class Trend(str, Enum):
    UPWARD = "upward"
    DOWNWARD = "downward"
    STABLE = "stable"


# Chart models
class ChartType(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    DOUGHNUT = "doughnut"
    SCATTER = "scatter"


class ChartFamily(str, Enum):
    CATEGORICAL = "categorical"
    SCATTER = "scatter"
    GROUPED = "grouped"


class ChartDataset(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    values: Tuple[float, ...]
    color: str
    point_colors: Tuple[str, ...] = ()


class ChartSeries(BaseModel):
    """Renderer-agnostic chart data.

    Categorical and grouped charts fill ``labels``; scatter charts fill
    ``coordinates``. Both carry their values in ``datasets``.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    family: ChartFamily
    labels: Tuple[str, ...] = ()
    coordinates: Tuple[Tuple[float, float], ...] = ()
    datasets: Tuple[ChartDataset, ...] = ()


# Analysis models
class QuickAnalysisSummary(BaseModel):
    total_records: int
    data_quality: int
    numeric_columns: int
    completeness: str


class QuickAnalysis(BaseModel):
    """Rule-based insights, trends and recommendations for a dataset."""

    summary: QuickAnalysisSummary
    insights: List[str] = Field(default_factory=list)
    trends: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    chart_suggestions: List[str] = Field(default_factory=list)


class DatasetSummary(BaseModel):
    total_rows: int
    total_columns: int
    columns: List[str]


class DataPreview(BaseModel):
    first_rows: List[List[Cell]]
    last_rows: List[List[Cell]]


class AnalysisResult(BaseModel):
    """Model for the full analysis of one dataset."""

    summary: DatasetSummary
    columns: List[ColumnProfile]
    statistics: Dict[str, ColumnStats]
    data_preview: DataPreview
    insights: List[str]


class AnalysisReport(BaseModel):
    """Model for analysis report."""

    file_id: str
    filename: str
    analysis_date: str
    results: AnalysisResult


class ErrorResponse(BaseModel):
    """Model for error responses."""

    error: str
    detail: str
