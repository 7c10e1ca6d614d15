# ============================================================================
# FILE: tests/unit/test_trends.py
# ============================================================================
"""
Unit tests for trend series across reports
"""

from datetime import datetime, timezone

from src.lab_analyzer.core.context import ClassifiedReport, ExtractionSource, ExtractedParameter
from src.lab_analyzer.temporal import TrendPoint, build_trend_series, pivot_trend_series


def _report(day, parameters):
    return ClassifiedReport(
        report_id=f"r{day}",
        filename=f"scan_{day}.png",
        created_at=datetime(2024, 1, day, tzinfo=timezone.utc),
        parameters=parameters,
        insights=[],
        extraction_source=ExtractionSource.DICTIONARY,
    )


def test_points_ordered_by_report_date(make_parameter):
    later = _report(20, [make_parameter("Glucose", value="100")])
    earlier = _report(5, [make_parameter("Glucose", value="92")])

    points = build_trend_series([later, earlier])

    assert points == [
        TrendPoint(date="Jan 5", value=92.0, parameter="Glucose"),
        TrendPoint(date="Jan 20", value=100.0, parameter="Glucose"),
    ]


def test_non_numeric_values_skipped(make_parameter):
    odd = ExtractedParameter(
        name="Culture",
        value="negative",
        numeric_value=0.0,
        unit="",
        normal_range="Varies",
        category="Other",
    )
    points = build_trend_series([_report(5, [odd, make_parameter("Glucose", value="92")])])

    assert [p.parameter for p in points] == ["Glucose"]


def test_pivot_rows_by_date(make_parameter):
    reports = [
        _report(5, [make_parameter("Glucose", value="92"), make_parameter("Hemoglobin", value="14")]),
        _report(20, [make_parameter("Glucose", value="100")]),
    ]

    rows = pivot_trend_series(build_trend_series(reports))

    assert rows == [
        {"date": "Jan 5", "Glucose": 92.0, "Hemoglobin": 14.0},
        {"date": "Jan 20", "Glucose": 100.0},
    ]


def test_no_reports():
    assert build_trend_series([]) == []
    assert pivot_trend_series([]) == []
