# ============================================================================
# src/lab_analyzer/validators/__init__.py
# ============================================================================
"""
Validators for extracted lab values.
"""

from .range_classifier import RangeClassifier, ClassificationResult, classify_value

__all__ = [
    'RangeClassifier',
    'ClassificationResult',
    'classify_value',
]
