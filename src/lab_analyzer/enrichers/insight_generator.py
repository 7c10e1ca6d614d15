# ============================================================================
# src/lab_analyzer/enrichers/insight_generator.py
# ============================================================================
"""
Insight Generator

Turns a classified parameter list into short advisory messages, always in
this order:

1. One aggregate message for critical parameters
2. One aggregate message for high parameters
3. One aggregate message for low parameters
4. Targeted advice: cholesterol high, glucose high, hemoglobin low
5. Two reassurance messages if nothing above applied

Insights are derived, never stored on their own; regenerate them whenever
the parameter list changes.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.context.enums import ParameterStatus
from ..core.context.extracted_parameter import ExtractedParameter

logger = logging.getLogger(__name__)

CRITICAL_TEMPLATE = "⚠️ Critical Alert: {names} require immediate medical attention."
HIGH_TEMPLATE = "📈 Elevated Values: {names} are above normal range."
LOW_TEMPLATE = "📉 Below Normal: {names} are below normal range."

# (name keyword, triggering status, advice) checked in this order
TARGETED_ADVICE: Tuple[Tuple[str, ParameterStatus, str], ...] = (
    (
        "cholesterol",
        ParameterStatus.HIGH,
        "💡 Consider dietary changes and regular exercise to help manage cholesterol levels.",
    ),
    (
        "glucose",
        ParameterStatus.HIGH,
        "💡 Monitor blood sugar levels and consider consulting with a healthcare provider about diabetes risk.",
    ),
    (
        "hemoglobin",
        ParameterStatus.LOW,
        "💡 Low hemoglobin may indicate anemia. Consider iron-rich foods and consult your doctor.",
    ),
)

DEFAULT_INSIGHTS = (
    "✅ Overall health parameters appear to be within normal ranges.",
    "💡 Continue maintaining a healthy lifestyle with regular exercise and balanced nutrition.",
)


class InsightGenerator:
    """Derive advisory messages from classified parameters."""

    def generate(self, parameters: Iterable[ExtractedParameter]) -> List[str]:
        params = list(parameters)
        insights = []

        for status, template in (
            (ParameterStatus.CRITICAL, CRITICAL_TEMPLATE),
            (ParameterStatus.HIGH, HIGH_TEMPLATE),
            (ParameterStatus.LOW, LOW_TEMPLATE),
        ):
            names = [p.name for p in params if p.status == status]
            if names:
                insights.append(template.format(names=", ".join(names)))

        for keyword, status, advice in TARGETED_ADVICE:
            param = self._find_by_keyword(params, keyword)
            if param is not None and param.status == status:
                insights.append(advice)

        if not insights:
            insights.extend(DEFAULT_INSIGHTS)

        logger.debug(f"Generated {len(insights)} insights from {len(params)} parameters")
        return insights

    @staticmethod
    def _find_by_keyword(
        params: Sequence[ExtractedParameter],
        keyword: str
    ) -> Optional[ExtractedParameter]:
        """First parameter whose name contains the keyword."""
        for param in params:
            if keyword in param.name.lower():
                return param
        return None


_default_generator = InsightGenerator()


def generate_insights(parameters: Iterable[ExtractedParameter]) -> List[str]:
    return _default_generator.generate(parameters)
