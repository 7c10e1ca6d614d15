# ============================================================================
# FILE: src/lab_analyzer/temporal/trends.py
# ============================================================================
"""
Trend Series - parameter values across reports over time

Flattens a user's reports into chart-ready points, one per numeric
parameter value, labelled by report date ("Jan 5"). pivot_trend_series()
turns the points into one row per date for multi-line charts.
"""

from typing import List, Dict, Any, Iterable
import logging
from dataclasses import dataclass

from ..core.context.report import ClassifiedReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendPoint:
    """Single data point in a trend"""
    date: str
    value: float
    parameter: str


def format_date_label(report: ClassifiedReport) -> str:
    """Short month + day, e.g. 'Jan 5'."""
    created = report.created_at
    return f"{created.strftime('%b')} {created.day}"


def build_trend_series(reports: Iterable[ClassifiedReport]) -> List[TrendPoint]:
    """
    Collect trend points from reports, oldest report first.

    Values that do not parse as numbers are skipped.
    """
    points = []

    for report in sorted(reports, key=lambda r: r.created_at):
        label = format_date_label(report)
        for param in report.parameters:
            try:
                value = float(param.value)
            except (TypeError, ValueError):
                logger.debug(f"Skipping non-numeric {param.name}={param.value!r}")
                continue
            points.append(TrendPoint(date=label, value=value, parameter=param.name))

    return points


def pivot_trend_series(points: Iterable[TrendPoint]) -> List[Dict[str, Any]]:
    """
    Group points into rows keyed by date label.

    Returns:
        [{"date": "Jan 5", "Glucose": 92.0, ...}, ...] in first-seen date
        order; a later value for the same date and parameter wins
    """
    rows: Dict[str, Dict[str, Any]] = {}

    for point in points:
        row = rows.setdefault(point.date, {"date": point.date})
        row[point.parameter] = point.value

    return list(rows.values())
