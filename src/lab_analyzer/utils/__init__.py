# ============================================================================
# src/lab_analyzer/utils/__init__.py
# ============================================================================
"""
Utility modules for the lab report analyzer.
"""

from .exceptions import (
    LabAnalyzerError,
    DictionaryError,
    RangeSpecError,
    ConfigurationError,
)

from .logging import (
    setup_logging,
    JsonFormatter,
    log_performance,
)

from .text_normalizer import normalize_text, capitalize_words

__all__ = [
    # Exceptions
    'LabAnalyzerError',
    'DictionaryError',
    'RangeSpecError',
    'ConfigurationError',
    # Logging
    'setup_logging',
    'JsonFormatter',
    'log_performance',
    # Text
    'normalize_text',
    'capitalize_words',
]
