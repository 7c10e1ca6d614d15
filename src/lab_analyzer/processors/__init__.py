# ============================================================================
# src/lab_analyzer/processors/__init__.py
# ============================================================================
"""
Extraction processors.

- lab: dictionary-driven matching and classification
- fallback: generic and synthetic tiers
"""

from .lab import ParameterExtractor, extract_parameters
from .fallback import GenericFallbackMatcher, SyntheticFallbackGenerator

__all__ = [
    "ParameterExtractor",
    "extract_parameters",
    "GenericFallbackMatcher",
    "SyntheticFallbackGenerator",
]
