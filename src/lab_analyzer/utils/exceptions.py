# ============================================================================
# src/lab_analyzer/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the lab report analyzer.

Extraction itself never raises; these cover the construction and
configuration seams around it.
"""


class LabAnalyzerError(Exception):
    """Base exception for all lab analyzer errors."""
    pass


class DictionaryError(LabAnalyzerError):
    """Parameter dictionary is malformed (duplicate or empty names)."""
    pass


class RangeSpecError(LabAnalyzerError):
    """Reference range specification cannot be parsed."""
    def __init__(self, message: str, range_spec: str):
        super().__init__(message)
        self.range_spec = range_spec


class ConfigurationError(LabAnalyzerError):
    """Invalid configuration."""
    pass
