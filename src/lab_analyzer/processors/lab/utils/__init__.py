# src/lab_analyzer/processors/lab/utils/__init__.py

from .parsing import (
    NUMBER_PATTERN,
    parse_numeric_value,
    round_half_up,
)

__all__ = [
    "NUMBER_PATTERN",
    "parse_numeric_value",
    "round_half_up",
]
