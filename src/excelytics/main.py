"""
Excel Analytics - Main FastAPI Application
"""
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .analysis import analyze_dataset
from .config import Settings, get_settings
from .errors import (
    AnalyticsError,
    SpreadsheetParseError,
    UnsupportedFileError,
)
from .insights import InsightGenerator, RuleBasedInsightGenerator
from .models import AnalysisReport, ChartSeries, ChartType, ErrorResponse, QuickAnalysis
from .parsing import PandasSpreadsheetParser, SpreadsheetParser
from .projector import project
from .report import render_text_report, report_filename

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper() if isinstance(settings.log_level, str) else settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Excel Analytics",
    description="Spreadsheet summaries, insights and chart data",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Unreadable uploads are 400; other analytics errors map to 422.
ERROR_STATUS = {
    UnsupportedFileError: 400,
    SpreadsheetParseError: 400,
}


@app.exception_handler(AnalyticsError)
async def analytics_error_handler(request: Request, exc: AnalyticsError):
    status_code = ERROR_STATUS.get(type(exc), 422)
    logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc, exc.code)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=exc.code, detail=str(exc)).model_dump(),
    )


# ============================================================================
# DEPENDENCIES
# ============================================================================

def get_parser() -> SpreadsheetParser:
    return PandasSpreadsheetParser()


def get_rule_engine(settings: Settings = Depends(get_settings)) -> RuleBasedInsightGenerator:
    return RuleBasedInsightGenerator(quality_threshold=settings.data_quality_threshold)


def get_insight_generator(
    rule_engine: RuleBasedInsightGenerator = Depends(get_rule_engine),
) -> InsightGenerator:
    return rule_engine


async def read_upload(file: UploadFile, settings: Settings) -> bytes:
    """Validate an uploaded file and return its content."""
    extension = Path(file.filename or "").suffix.lower()
    if extension not in settings.allowed_extensions_list:
        logger.warning("Rejected upload %r: unsupported extension", file.filename)
        raise HTTPException(
            status_code=400,
            detail=f"Only {', '.join(settings.allowed_extensions_list)} files are allowed",
        )

    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > settings.max_upload_bytes:
        logger.warning("Rejected upload %r: %d bytes", file.filename, len(content))
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {settings.max_upload_size_mb} MB upload limit",
        )

    logger.info("Received upload %r (%d bytes)", file.filename, len(content))
    return content


# ============================================================================
# API ENDPOINTS
# ============================================================================

@app.post("/api/analyze", response_model=AnalysisReport)
async def analyze_file(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_settings),
    parser: SpreadsheetParser = Depends(get_parser),
    insight_generator: InsightGenerator = Depends(get_insight_generator),
):
    """Upload and analyze a spreadsheet."""
    content = await read_upload(file, settings)
    dataset = parser.parse(content, file.filename)
    results = analyze_dataset(
        dataset,
        insight_generator=insight_generator,
        preview_rows=settings.preview_rows,
    )
    return AnalysisReport(
        file_id=str(uuid.uuid4()),
        filename=file.filename,
        analysis_date=datetime.utcnow().isoformat(),
        results=results,
    )


@app.post("/api/quick-analysis", response_model=QuickAnalysis)
async def quick_analysis(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_settings),
    parser: SpreadsheetParser = Depends(get_parser),
    rule_engine: RuleBasedInsightGenerator = Depends(get_rule_engine),
):
    """Insights, trends and recommendations for a spreadsheet."""
    content = await read_upload(file, settings)
    dataset = parser.parse(content, file.filename)
    return rule_engine.quick_analysis(dataset)


@app.post("/api/report", response_class=PlainTextResponse)
async def download_report(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_settings),
    parser: SpreadsheetParser = Depends(get_parser),
    rule_engine: RuleBasedInsightGenerator = Depends(get_rule_engine),
):
    """Quick analysis of a spreadsheet as a downloadable text report."""
    content = await read_upload(file, settings)
    dataset = parser.parse(content, file.filename)
    text = render_text_report(rule_engine.quick_analysis(dataset), filename=file.filename)
    return PlainTextResponse(
        text,
        headers={"Content-Disposition": f'attachment; filename="{report_filename()}"'},
    )


@app.post("/api/chart", response_model=ChartSeries)
async def chart_data(
    file: UploadFile = File(...),
    x_axis: str = Form(...),
    y_axis: str = Form(...),
    chart_type: ChartType = Form(ChartType.BAR),
    value_column: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
    parser: SpreadsheetParser = Depends(get_parser),
):
    """Chart series for the chosen axes of a spreadsheet."""
    content = await read_upload(file, settings)
    dataset = parser.parse(content, file.filename)
    return project(dataset, x_axis, y_axis, chart_type=chart_type, value_header=value_column)


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
