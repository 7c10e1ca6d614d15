# src/lab_analyzer/processors/fallback/generic.py
"""
Generic Fallback - loose label/number scan

Used only when no dictionary parameter matched. Picks up anything shaped
like a labelled measurement:

    "Ferritin : 85"        -> Ferritin, 85, <placeholder unit>
    "Ferritin 85 ng/mL"    -> Ferritin, 85, ng/mL

There is no reference range to classify against, so every hit is reported
as normal with range "Varies" and category "Other".
"""

import logging
import re
from typing import List

from ..lab.utils.parsing import NUMBER_PATTERN, parse_numeric_value
from ...config import ExtractionSettings, extraction_settings
from ...core.context.enums import ExtractionSource, ParameterStatus
from ...core.context.extracted_parameter import ExtractedParameter
from ...utils.text_normalizer import capitalize_words

logger = logging.getLogger(__name__)

GENERIC_RANGE = "Varies"
GENERIC_CATEGORY = "Other"

# Scans anchor on the value; the label is recovered by walking back over
# LABEL_CHARS, so each character is examined a bounded number of times.
COLON_VALUE = re.compile(rf':\s*({NUMBER_PATTERN})')
VALUE_UNIT = re.compile(rf'(?<=\s)({NUMBER_PATTERN})\s*([a-zA-Z/µ%]+)')
LABEL_CHARS = re.compile(r'[a-zA-Z\s]')


class GenericFallbackMatcher:
    """
    Scan normalized text for unlabelled-by-dictionary measurements.

    Both layouts are scanned over the whole text, the colon layout first.
    Results are not deduplicated.
    """

    def __init__(self, settings: ExtractionSettings = None):
        self.settings = settings or extraction_settings

    def scan(self, text: str) -> List[ExtractedParameter]:
        if not text:
            return []

        found = []

        # "label : value"; the label runs right up to the colon
        floor = 0
        for match in COLON_VALUE.finditer(text):
            start = _label_start(text, match.start(), floor)
            if start == match.start():
                continue
            floor = match.end()
            param = self._build(text[start:match.start()], match.group(1), None)
            if param:
                found.append(param)

        # "label value unit"; at least one whitespace between label and value
        floor = 0
        for match in VALUE_UNIT.finditer(text):
            start = _label_start(text, match.start(), floor)
            if match.start() - start < 2:
                continue
            floor = match.end()
            param = self._build(text[start:match.start()], match.group(1), match.group(2))
            if param:
                found.append(param)

        logger.debug(f"Generic fallback found {len(found)} candidates")
        return found

    def _build(self, label: str, raw_value: str, unit: str):
        clean_label = label.strip()
        if len(clean_label) < self.settings.GENERIC_MIN_LABEL_LENGTH:
            return None

        numeric = parse_numeric_value(raw_value)
        if numeric is None:
            return None

        return ExtractedParameter(
            name=capitalize_words(clean_label),
            value=raw_value,
            numeric_value=numeric,
            unit=unit or self.settings.GENERIC_UNIT_PLACEHOLDER,
            normal_range=GENERIC_RANGE,
            category=GENERIC_CATEGORY,
            status=ParameterStatus.NORMAL,
            source=ExtractionSource.GENERIC,
        )


def _label_start(text: str, end: int, floor: int) -> int:
    """
    Index where the run of label characters ending at `end` begins.

    Never walks back past `floor`, the end of the previous accepted match.
    """
    start = end
    while start > floor and LABEL_CHARS.match(text, start - 1):
        start -= 1
    return start
