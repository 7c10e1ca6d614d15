# src/lab_analyzer/processors/fallback/__init__.py
"""
Fallback tiers used when the dictionary matcher finds nothing.
"""

from .generic import GenericFallbackMatcher
from .synthetic import SyntheticFallbackGenerator, DEMO_PARAMETERS, clock_seed

__all__ = [
    "GenericFallbackMatcher",
    "SyntheticFallbackGenerator",
    "DEMO_PARAMETERS",
    "clock_seed",
]
