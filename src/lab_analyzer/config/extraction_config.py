# ============================================================================
# src/lab_analyzer/config/extraction_config.py
# ============================================================================
"""
Extraction Settings
- Fallback tiers
- Generic label filtering
- Synthetic demo seed
- Report labelling
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

class ExtractionSettings(BaseSettings):
    ENABLE_GENERIC_FALLBACK: bool = Field(
        default=True,
        description="Scan for loose 'label : number' pairs when no dictionary parameter matches"
    )
    ENABLE_SYNTHETIC_FALLBACK: bool = Field(
        default=True,
        description="Emit the synthetic demo set when no tier finds anything. Results are tagged source=synthetic."
    )
    GENERIC_UNIT_PLACEHOLDER: str = Field(
        default="units",
        description="Unit reported for generic matches that carry no unit token"
    )
    GENERIC_MIN_LABEL_LENGTH: int = Field(
        default=3,
        ge=1,
        description="Shortest trimmed label accepted by the generic fallback"
    )
    EXTRACTION_SYNTHETIC_SEED: Optional[int] = Field(
        default=None,
        ge=0, le=999,
        description="Fixed seed for the synthetic fallback. Unset means wall-clock milliseconds % 1000."
    )
    REPORT_TYPE: str = Field(
        default="General Health Panel",
        description="Report type stamped on assembled reports"
    )

extraction_settings = ExtractionSettings()
