# ============================================================================
# FILE: src/lab_analyzer/validators/range_classifier.py
# ============================================================================
"""
Range Classification

Assigns a status tier to a value relative to its reference range:

    "<200"      critical > 300, high > 200, else normal
    ">40"       critical < 20,  low < 40,   else normal
    "0.6-1.2"   critical < 0.42 or > 1.56, low < 0.6, high > 1.2, else normal

Critical uses fixed multipliers on the same boundary that defines high/low.

A range that cannot be parsed classifies as NORMAL, never as an alarm.
The result carries range_valid=False on that path.
"""

from dataclasses import dataclass
from typing import Optional, Union
import logging

from ..constants.critical_values import (
    UPPER_BOUND_CRITICAL_FACTOR,
    LOWER_BOUND_CRITICAL_FACTOR,
    CLOSED_RANGE_CRITICAL_LOW_FACTOR,
    CLOSED_RANGE_CRITICAL_HIGH_FACTOR,
)
from ..core.context.enums import ParameterStatus
from ..core.context.range_spec import (
    RangeSpec,
    UpperBound,
    LowerBound,
    ClosedRange,
    parse_range_spec,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    status: ParameterStatus
    range_valid: bool


class RangeClassifier:
    """
    Classify numeric values against parsed reference ranges.

    Stateless; one instance can be shared across threads.
    """

    def classify(
        self,
        value: float,
        range_spec: Union[str, RangeSpec, None]
    ) -> ClassificationResult:
        """
        Classify a value.

        Args:
            value: Numeric lab value (non-negative)
            range_spec: Range text ("<200", ">40", "0.6-1.2") or parsed variant

        Returns:
            ClassificationResult; status is NORMAL and range_valid False when
            the range cannot be parsed
        """
        parsed = self._resolve(range_spec)

        if parsed is None:
            logger.debug(f"Unparseable range {range_spec!r}, defaulting {value} to normal")
            return ClassificationResult(ParameterStatus.NORMAL, range_valid=False)

        return ClassificationResult(self._tier(value, parsed), range_valid=True)

    def _resolve(self, range_spec: Union[str, RangeSpec, None]) -> Optional[RangeSpec]:
        if isinstance(range_spec, (UpperBound, LowerBound, ClosedRange)):
            return range_spec
        if isinstance(range_spec, str):
            return parse_range_spec(range_spec)
        return None

    def _tier(self, value: float, spec: RangeSpec) -> ParameterStatus:
        if isinstance(spec, UpperBound):
            if value > spec.max * UPPER_BOUND_CRITICAL_FACTOR:
                return ParameterStatus.CRITICAL
            if value > spec.max:
                return ParameterStatus.HIGH
            return ParameterStatus.NORMAL

        if isinstance(spec, LowerBound):
            if value < spec.min * LOWER_BOUND_CRITICAL_FACTOR:
                return ParameterStatus.CRITICAL
            if value < spec.min:
                return ParameterStatus.LOW
            return ParameterStatus.NORMAL

        if (value < spec.min * CLOSED_RANGE_CRITICAL_LOW_FACTOR
                or value > spec.max * CLOSED_RANGE_CRITICAL_HIGH_FACTOR):
            return ParameterStatus.CRITICAL
        if value < spec.min:
            return ParameterStatus.LOW
        if value > spec.max:
            return ParameterStatus.HIGH
        return ParameterStatus.NORMAL


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_classifier = RangeClassifier()


def classify_value(value: float, range_spec: Union[str, RangeSpec, None]) -> ParameterStatus:
    """
    Quick classification.

    Returns:
        Status tier only; use RangeClassifier.classify() to also learn
        whether the range was valid
    """
    return _default_classifier.classify(value, range_spec).status
