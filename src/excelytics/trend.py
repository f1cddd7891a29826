"""
Trend detection by comparing the means of the two halves of a series.
"""
from typing import Sequence

from .errors import InsufficientDataError
from .models import Trend

MIN_TREND_POINTS = 3


def detect_trend(series: Sequence[float]) -> Trend:
    """
    Classify a series as upward, downward or stable.

    The series is split at ``len // 2``; for odd lengths the middle point
    belongs to the second half. Means are compared exactly.

    Raises:
        InsufficientDataError: If the series has fewer than three points
    """
    if len(series) < MIN_TREND_POINTS:
        raise InsufficientDataError(
            f"Trend detection needs at least {MIN_TREND_POINTS} points, got {len(series)}"
        )

    mid = len(series) // 2
    first_half = series[:mid]
    second_half = series[mid:]
    first_avg = sum(first_half) / len(first_half)
    second_avg = sum(second_half) / len(second_half)

    if second_avg > first_avg:
        return Trend.UPWARD
    if second_avg < first_avg:
        return Trend.DOWNWARD
    return Trend.STABLE
