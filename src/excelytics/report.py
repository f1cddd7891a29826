"""
Plain-text export of a quick analysis.
"""
from datetime import datetime
from typing import List, Optional

from .models import QuickAnalysis


def _numbered(lines: List[str]) -> List[str]:
    if not lines:
        return ["None"]
    return [f"{index}. {line}" for index, line in enumerate(lines, start=1)]


def render_text_report(
    analysis: QuickAnalysis,
    filename: Optional[str] = None,
    generated_on: Optional[datetime] = None,
) -> str:
    """
    Render a quick analysis as a plain-text report.

    Args:
        analysis: Result of a quick analysis
        filename: Name of the analyzed file, if any
        generated_on: Report timestamp, defaults to now (UTC)

    Returns:
        Report text
    """
    if generated_on is None:
        generated_on = datetime.utcnow()

    summary = analysis.summary
    lines = ["DATA ANALYSIS REPORT", f"Generated on: {generated_on.date().isoformat()}"]
    if filename:
        lines.append(f"Source file: {filename}")

    lines += [
        "",
        "SUMMARY:",
        f"- Total Records: {summary.total_records}",
        f"- Data Quality: {summary.data_quality}%",
        f"- Numeric Columns: {summary.numeric_columns}",
        f"- Completeness: {summary.completeness}",
        "",
        "KEY INSIGHTS:",
        *_numbered(analysis.insights),
        "",
        "TRENDS IDENTIFIED:",
        *_numbered(analysis.trends),
        "",
        "RECOMMENDATIONS:",
        *_numbered(analysis.recommendations),
    ]
    return "\n".join(lines) + "\n"


def report_filename(now: Optional[datetime] = None) -> str:
    if now is None:
        now = datetime.utcnow()
    return f"Analysis-Report-{now.strftime('%Y%m%d%H%M%S')}.txt"
