"""
Spreadsheet decoding into datasets.
"""
import io
import logging
import math
from datetime import date, datetime
from pathlib import Path
from typing import Protocol

import numpy as np
import pandas as pd

from .errors import SpreadsheetParseError, UnsupportedFileError
from .models import Cell, Dataset

logger = logging.getLogger(__name__)

EXCEL_EXTENSIONS = (".xlsx", ".xlsm", ".xls")
DELIMITED_EXTENSIONS = {".csv": ",", ".tsv": "\t"}


class SpreadsheetParser(Protocol):
    def parse(self, content: bytes, filename: str) -> Dataset:
        ...


def _to_cell(value) -> Cell:
    if value is None:
        return None
    if isinstance(value, (bool, np.bool_)):
        return str(bool(value)).upper()
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        value = float(value)
        return None if math.isnan(value) else value
    if value is pd.NaT:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def dataframe_to_dataset(df: pd.DataFrame) -> Dataset:
    """
    Convert a DataFrame into a Dataset.

    Args:
        df: Parsed sheet, one header row

    Returns:
        Dataset with stringified headers and plain Python cells
    """
    headers = tuple(str(column) for column in df.columns)
    rows = tuple(
        tuple(_to_cell(value) for value in row)
        for row in df.itertuples(index=False, name=None)
    )
    return Dataset(headers=headers, rows=rows)


class PandasSpreadsheetParser:
    """Reads Excel workbooks and delimited text files with pandas."""

    def __init__(self, sheet_name=0):
        self.sheet_name = sheet_name

    def read_dataframe(self, content: bytes, filename: str) -> pd.DataFrame:
        extension = Path(filename).suffix.lower()
        buffer = io.BytesIO(content)
        if extension in EXCEL_EXTENSIONS:
            return pd.read_excel(buffer, sheet_name=self.sheet_name)
        if extension in DELIMITED_EXTENSIONS:
            return pd.read_csv(buffer, sep=DELIMITED_EXTENSIONS[extension])
        raise UnsupportedFileError(f"Unsupported file type: {extension or filename!r}")

    def parse(self, content: bytes, filename: str) -> Dataset:
        """
        Decode an uploaded file into a Dataset.

        Raises:
            UnsupportedFileError: If the extension is not a known spreadsheet type
            SpreadsheetParseError: If the content cannot be read
        """
        try:
            df = self.read_dataframe(content, filename)
        except UnsupportedFileError:
            raise
        except Exception as e:
            raise SpreadsheetParseError(f"Could not read {filename}: {e}") from e

        dataset = dataframe_to_dataset(df)
        logger.info(
            "Parsed %s: %d rows, %d columns",
            filename,
            len(dataset.rows),
            len(dataset.headers),
        )
        return dataset
