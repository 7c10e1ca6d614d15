# ============================================================================
# src/lab_analyzer/core/context/extracted_parameter.py
# ============================================================================
"""
Single extracted health parameter
- Value kept both as matched text and as a float
- Status assigned after extraction
- Source tier recorded so synthetic data is never mistaken for real data
"""

from dataclasses import dataclass
from typing import Any, Dict

from .enums import ExtractionSource, ParameterStatus

@dataclass(frozen=True)
class ExtractedParameter:
    name: str
    value: str
    numeric_value: float
    unit: str
    normal_range: str
    category: str
    status: ParameterStatus = ParameterStatus.NORMAL
    source: ExtractionSource = ExtractionSource.DICTIONARY

    @property
    def is_abnormal(self) -> bool:
        return self.status != ParameterStatus.NORMAL

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape consumed by the report store and renderers."""
        return {
            "name": self.name,
            "value": self.value,
            "unit": self.unit,
            "normalRange": self.normal_range,
            "status": self.status.value,
            "category": self.category,
            "source": self.source.value,
        }
