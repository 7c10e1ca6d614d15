# src/lab_analyzer/processors/lab/__init__.py
"""
Lab report processing: dictionary matching and tier orchestration.
"""

from .matcher import DictionaryMatcher, ValueMatch, PATTERN_ORDER
from .extractor import ParameterExtractor, extract_parameters, get_extractor

__all__ = [
    "DictionaryMatcher",
    "ValueMatch",
    "PATTERN_ORDER",
    "ParameterExtractor",
    "extract_parameters",
    "get_extractor",
]
