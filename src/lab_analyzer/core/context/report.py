# ============================================================================
# src/lab_analyzer/core/context/report.py
# ============================================================================
"""
Extraction and report containers
- ExtractionResult: parameters plus the tier that produced them
- ClassifiedReport: what the upload workflow persists
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Tuple

from .enums import ExtractionSource, ParameterStatus
from .extracted_parameter import ExtractedParameter

@dataclass(frozen=True)
class ExtractionResult:
    parameters: Tuple[ExtractedParameter, ...]
    source: ExtractionSource

    @property
    def is_synthetic(self) -> bool:
        return self.source == ExtractionSource.SYNTHETIC

    def __len__(self) -> int:
        return len(self.parameters)


@dataclass
class ClassifiedReport:
    report_id: str
    filename: str
    created_at: datetime
    parameters: List[ExtractedParameter]
    insights: List[str]
    extraction_source: ExtractionSource
    report_type: str = "General Health Panel"

    # Free-form notes for the caller (e.g. why a fallback tier was used)
    notes: List[str] = field(default_factory=list)

    def status_counts(self) -> Dict[str, int]:
        """Count of parameters per status; every status is present."""
        counts = {status.value: 0 for status in ParameterStatus}
        for param in self.parameters:
            counts[param.status.value] += 1
        return counts

    def parameters_by_category(self) -> Dict[str, List[ExtractedParameter]]:
        """Group parameters by category, keeping first-seen category order."""
        grouped: Dict[str, List[ExtractedParameter]] = {}
        for param in self.parameters:
            grouped.setdefault(param.category, []).append(param)
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.report_id,
            "filename": self.filename,
            "uploadDate": self.created_at.isoformat(),
            "reportType": self.report_type,
            "source": self.extraction_source.value,
            "parameters": [p.to_dict() for p in self.parameters],
            "insights": list(self.insights),
            "statusCounts": self.status_counts(),
            "notes": list(self.notes),
        }
