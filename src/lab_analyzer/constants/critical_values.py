# ============================================================================
# src/lab_analyzer/constants/critical_values.py
# ============================================================================
"""
Critical Value Multipliers
- Critical is a severity tier relative to the same boundary that defines
  high/low, not a separate range per parameter
"""

# "<MAX": critical above MAX * 1.5
UPPER_BOUND_CRITICAL_FACTOR = 1.5

# ">MIN": critical below MIN * 0.5
LOWER_BOUND_CRITICAL_FACTOR = 0.5

# "MIN-MAX": critical below MIN * 0.7 or above MAX * 1.3
CLOSED_RANGE_CRITICAL_LOW_FACTOR = 0.7
CLOSED_RANGE_CRITICAL_HIGH_FACTOR = 1.3
