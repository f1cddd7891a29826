"""Exceptions raised by the analysis core and the spreadsheet parser."""


class AnalyticsError(Exception):
    """Base class for recoverable analysis errors."""

    code = "analytics_error"


class EmptyColumnError(AnalyticsError):
    """Raised when statistics are requested on a column with no numeric values."""

    code = "empty_column"


class InsufficientDataError(AnalyticsError):
    """Raised when a series is too short for trend detection."""

    code = "insufficient_data"


class UnknownColumnError(AnalyticsError):
    """Raised when a column name or index does not exist in the dataset."""

    code = "unknown_column"


class UnsupportedFileError(AnalyticsError):
    """Raised when an uploaded file has an extension we cannot parse."""

    code = "unsupported_file"


class SpreadsheetParseError(AnalyticsError):
    """Raised when file content cannot be decoded into a dataset."""

    code = "parse_error"
