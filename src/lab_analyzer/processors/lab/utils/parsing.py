# src/lab_analyzer/processors/lab/utils/parsing.py
"""
Parsing utilities for lab value extraction.
"""

import math
import re
from typing import Optional

# Unsigned integer or decimal as it appears in OCR text: "14", "14.2", "14."
NUMBER_PATTERN = r'\d+\.?\d*'

_NUMBER_RE = re.compile(rf'^{NUMBER_PATTERN}$')


def parse_numeric_value(value_str: Optional[str]) -> Optional[float]:
    """
    Parse a matched value into a positive float.

    Handles values like:
    - "12.5"
    - "7"
    - "14."    (trailing point left by OCR)

    Rejects:
    - signed values ("-3", "+3"): clinical values are non-negative
    - zero ("0", "0.0")
    - anything that is not a plain number ("12a", "", "1.2.3")
    """
    if not value_str:
        return None

    value_str = value_str.strip()

    if not _NUMBER_RE.match(value_str):
        return None

    try:
        value = float(value_str)
    except ValueError:
        return None

    if not math.isfinite(value) or value <= 0:
        return None

    return value


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero for positive values.

    Python's round() uses banker's rounding (round(2.5) == 2); demo values
    are rounded the conventional way.
    """
    return int(math.floor(value + 0.5))
