"""
Temporal views over stored reports.
"""

from .trends import TrendPoint, build_trend_series, pivot_trend_series

__all__ = ["TrendPoint", "build_trend_series", "pivot_trend_series"]
