# ============================================================================
# src/lab_analyzer/enrichers/__init__.py
# ============================================================================
"""
Post-extraction enrichment: advisory insights.
"""

from .insight_generator import (
    InsightGenerator,
    generate_insights,
    DEFAULT_INSIGHTS,
    TARGETED_ADVICE,
)

__all__ = [
    "InsightGenerator",
    "generate_insights",
    "DEFAULT_INSIGHTS",
    "TARGETED_ADVICE",
]
