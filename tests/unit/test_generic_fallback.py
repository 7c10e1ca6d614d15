# ============================================================================
# FILE: tests/unit/test_generic_fallback.py
# ============================================================================
"""
Unit tests for the generic label/number fallback
"""

import time

from src.lab_analyzer.config import ExtractionSettings
from src.lab_analyzer.core.context import ExtractionSource, ParameterStatus
from src.lab_analyzer.processors.fallback import GenericFallbackMatcher
from src.lab_analyzer.processors.lab import ParameterExtractor
from src.lab_analyzer.utils.text_normalizer import normalize_text


def _scan(text, **overrides):
    matcher = GenericFallbackMatcher(ExtractionSettings(**overrides))
    return matcher.scan(normalize_text(text))


def test_colon_then_unit_layouts(unknown_lab_text):
    found = _scan(unknown_lab_text)

    assert [(p.name, p.value, p.unit) for p in found] == [
        ("Ferritin", "85", "units"),
        ("Lipase", "42", "U/L"),
    ]


def test_generic_values_are_unclassified():
    param = _scan("Ferritin : 850")[0]

    assert param.status == ParameterStatus.NORMAL
    assert param.normal_range == "Varies"
    assert param.category == "Other"
    assert param.source == ExtractionSource.GENERIC


def test_label_is_capitalized():
    assert _scan("ferritin level : 85")[0].name == "Ferritin Level"


def test_short_labels_rejected():
    assert _scan("Fe : 85") == []


def test_min_label_length_setting():
    assert _scan("Fe : 85", GENERIC_MIN_LABEL_LENGTH=2)[0].name == "Fe"


def test_zero_value_rejected():
    assert _scan("Ferritin : 0") == []


def test_unit_placeholder_setting():
    assert _scan("Ferritin : 85", GENERIC_UNIT_PLACEHOLDER="n/a")[0].unit == "n/a"


def test_repeated_labels_not_deduplicated():
    found = _scan("Ferritin : 85 Ferritin : 90")

    assert [p.value for p in found] == ["85", "90"]


def test_no_measurements():
    assert _scan("Patient notes only") == []
    assert _scan("") == []


def test_label_stops_at_previous_match():
    found = _scan("Ferritin 85 ng Lipase 42 U/L")

    assert [(p.name, p.value, p.unit) for p in found] == [
        ("Ferritin", "85", "ng"),
        ("Lipase", "42", "U/L"),
    ]


def test_label_needs_whitespace_before_value():
    assert _scan("Ferritin85 ng") == []


def test_unit_word_after_colon_value_not_a_label():
    """'85 Lipase' must not turn 'Lipase' into a unit with an empty label"""
    found = _scan("Ferritin : 85 Lipase 42 U/L")

    assert [p.name for p in found] == ["Ferritin", "Lipase"]


def test_long_text_scans_in_linear_time():
    text = "Patient notes only " * 1100
    assert len(text) > 20000

    started = time.perf_counter()
    assert _scan(text) == []
    assert _scan(text.replace("only", "only:")) == []
    assert (time.perf_counter() - started) < 1.0


def test_long_text_without_values_extracts_quickly():
    extractor = ParameterExtractor(settings=ExtractionSettings(ENABLE_SYNTHETIC_FALLBACK=False))
    text = "Patient notes only " * 1100

    started = time.perf_counter()
    result = extractor.extract(text)

    assert result.parameters == ()
    assert (time.perf_counter() - started) < 1.0
