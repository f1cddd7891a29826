import pytest

from excelytics.analysis import analyze_dataset, analyze_spreadsheet
from excelytics.errors import UnsupportedFileError
from excelytics.models import ColumnStats, Dataset, SemanticRole


class StubInsightGenerator:
    def __init__(self):
        self.seen = []

    def generate_insights(self, dataset):
        self.seen.append(dataset)
        return ["stub insight"]


def test_analyze_dataset(monthly_sales):
    result = analyze_dataset(monthly_sales)

    assert result.summary.total_rows == 12
    assert result.summary.total_columns == 4
    assert result.summary.columns == ["Month", "Region", "Sales ($)", "Customers"]
    assert [c.semantic_role for c in result.columns][1:3] == [SemanticRole.REGION, SemanticRole.SALES]
    assert list(result.statistics) == ["Sales ($)", "Customers"]
    assert result.statistics["Sales ($)"] == ColumnStats(sum=1905, mean=158.75, min=90, max=230, count=12)
    assert result.data_preview.first_rows[0] == ["Jan", "North", 100, 45]
    assert result.data_preview.last_rows[-1] == ["Dec", "South", 230, 98]
    assert len(result.data_preview.first_rows) == 5
    assert "Total Sales ($): $1,905" in result.insights


def test_analyze_dataset_uses_injected_generator(monthly_sales):
    generator = StubInsightGenerator()

    result = analyze_dataset(monthly_sales, insight_generator=generator, preview_rows=2)

    assert result.insights == ["stub insight"]
    assert generator.seen == [monthly_sales]
    assert len(result.data_preview.first_rows) == 2
    assert len(result.data_preview.last_rows) == 2


def test_analyze_empty_dataset():
    result = analyze_dataset(Dataset(headers=("Month", "Sales")))

    assert result.summary.total_rows == 0
    assert result.statistics == {}
    assert result.data_preview.first_rows == []
    assert result.data_preview.last_rows == []


def test_analyze_spreadsheet(monthly_sales_csv):
    result = analyze_spreadsheet(monthly_sales_csv, "sales.csv")

    assert result.summary.total_rows == 12
    assert result.statistics["Customers"].count == 12


def test_analyze_spreadsheet_rejects_unknown_type():
    with pytest.raises(UnsupportedFileError):
        analyze_spreadsheet(b"{}", "data.json")
