# src/lab_analyzer/core/context/__init__.py

from .enums import ParameterStatus, ExtractionSource
from .range_spec import (
    RangeSpec,
    UpperBound,
    LowerBound,
    ClosedRange,
    parse_range_spec,
    require_range_spec,
)
from .parameter_definition import ParameterDefinition
from .extracted_parameter import ExtractedParameter
from .report import ExtractionResult, ClassifiedReport

__all__ = [
    "ParameterStatus",
    "ExtractionSource",
    "RangeSpec",
    "UpperBound",
    "LowerBound",
    "ClosedRange",
    "parse_range_spec",
    "require_range_spec",
    "ParameterDefinition",
    "ExtractedParameter",
    "ExtractionResult",
    "ClassifiedReport",
]
