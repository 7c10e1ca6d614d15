# ============================================================================
# src/lab_analyzer/core/__init__.py
# ============================================================================
"""
Core data model. The report pipeline lives in lab_analyzer.core.pipeline.
"""

from .context import (
    ParameterStatus,
    ExtractionSource,
    ParameterDefinition,
    ExtractedParameter,
    ExtractionResult,
    ClassifiedReport,
)

__all__ = [
    "ParameterStatus",
    "ExtractionSource",
    "ParameterDefinition",
    "ExtractedParameter",
    "ExtractionResult",
    "ClassifiedReport",
]
