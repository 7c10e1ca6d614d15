# ============================================================================
# src/lab_analyzer/core/context/enums.py
# ============================================================================
"""
Processing Enums
- Parameter status tiers
- Extraction source tiers
"""

from enum import Enum

class ParameterStatus(str, Enum):
    NORMAL = "normal"
    HIGH = "high"
    LOW = "low"
    CRITICAL = "critical"

class ExtractionSource(str, Enum):
    DICTIONARY = "dictionary"   # matched against a known parameter
    GENERIC = "generic"         # loose "label : number" scan
    SYNTHETIC = "synthetic"     # demo values, not read from the document
