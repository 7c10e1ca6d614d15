# ============================================================================
# src/lab_analyzer/__init__.py
# ============================================================================
"""
Lab Report Analyzer

Turns OCR text from a scanned lab report into named health parameters,
each with a status tier, plus advisory insights.

    from lab_analyzer import extract_parameters, generate_insights

    params = extract_parameters("Hemoglobin: 11.2 g/dL  Glucose: 128 mg/dL")
    insights = generate_insights(params)
"""

from .constants import PARAMETER_DICTIONARY
from .core.context import (
    ParameterStatus,
    ExtractionSource,
    ParameterDefinition,
    ExtractedParameter,
    ExtractionResult,
    ClassifiedReport,
)
from .core.pipeline import analyze_report
from .enrichers import generate_insights
from .processors.lab import ParameterExtractor, extract_parameters
from .utils.text_normalizer import normalize_text
from .validators import RangeClassifier, classify_value

__version__ = "1.0.0"

__all__ = [
    "PARAMETER_DICTIONARY",
    "ParameterStatus",
    "ExtractionSource",
    "ParameterDefinition",
    "ExtractedParameter",
    "ExtractionResult",
    "ClassifiedReport",
    "analyze_report",
    "generate_insights",
    "ParameterExtractor",
    "extract_parameters",
    "normalize_text",
    "RangeClassifier",
    "classify_value",
]
