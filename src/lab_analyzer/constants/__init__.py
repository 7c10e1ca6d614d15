# ============================================================================
# src/lab_analyzer/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .parameter_dictionary import PARAMETER_DICTIONARY, validate_dictionary, get_parameter
from .critical_values import (
    UPPER_BOUND_CRITICAL_FACTOR,
    LOWER_BOUND_CRITICAL_FACTOR,
    CLOSED_RANGE_CRITICAL_LOW_FACTOR,
    CLOSED_RANGE_CRITICAL_HIGH_FACTOR,
)
