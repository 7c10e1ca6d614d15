# ============================================================================
# FILE: tests/unit/test_extractor.py
# ============================================================================
"""
Unit tests for the tiered parameter extractor
"""

import pytest
from src.lab_analyzer.config import ExtractionSettings
from src.lab_analyzer.core.context import (
    ExtractionSource,
    ParameterDefinition,
    ParameterStatus,
)
from src.lab_analyzer.processors.lab import ParameterExtractor, extract_parameters
from src.lab_analyzer.utils.exceptions import DictionaryError
from src.lab_analyzer.utils.text_normalizer import normalize_text


def test_extract_sample_report(extractor, sample_lab_text):
    result = extractor.extract(sample_lab_text)

    assert result.source == ExtractionSource.DICTIONARY
    assert [(p.name, p.value, p.status) for p in result.parameters] == [
        ("Hemoglobin", "11.2", ParameterStatus.LOW),
        ("Platelets", "245", ParameterStatus.NORMAL),
        ("Glucose", "128", ParameterStatus.HIGH),
        ("Total Cholesterol", "215", ParameterStatus.HIGH),
        ("Creatinine", "0.9", ParameterStatus.NORMAL),
    ]


def test_dictionary_metadata_copied(extractor):
    param = extractor.extract("Glucose: 92").parameters[0]

    assert param.unit == "mg/dL"
    assert param.normal_range == "70-100"
    assert param.category == "Metabolic"
    assert param.numeric_value == 92.0
    assert param.source == ExtractionSource.DICTIONARY


def test_critical_value(extractor):
    params = extractor.extract("Glucose: 120 Creatinine: 3.0").parameters

    assert [(p.name, p.status) for p in params] == [
        ("Glucose", ParameterStatus.HIGH),
        ("Creatinine", ParameterStatus.CRITICAL),
    ]


def test_alias_gives_same_result(extractor):
    assert extractor.extract("Hgb: 14.2") == extractor.extract("Hemoglobin: 14.2")


def test_extraction_is_idempotent_under_normalization(extractor, sample_lab_text):
    assert extractor.extract(sample_lab_text) == extractor.extract(normalize_text(sample_lab_text))


def test_generic_tier(extractor, unknown_lab_text):
    result = extractor.extract(unknown_lab_text)

    assert result.source == ExtractionSource.GENERIC
    assert [p.name for p in result.parameters] == ["Ferritin", "Lipase"]


@pytest.mark.parametrize("text", ["", "   \n ", None, "Patient notes only"])
def test_synthetic_tier_never_empty(extractor, text):
    result = extractor.extract(text, seed=500)

    assert result.is_synthetic
    assert len(result) == 3
    assert all(p.source == ExtractionSource.SYNTHETIC for p in result.parameters)


def test_generic_tier_disabled(unknown_lab_text):
    extractor = ParameterExtractor(settings=ExtractionSettings(ENABLE_GENERIC_FALLBACK=False))
    result = extractor.extract(unknown_lab_text, seed=500)

    assert result.source == ExtractionSource.SYNTHETIC


def test_all_fallbacks_disabled():
    extractor = ParameterExtractor(settings=ExtractionSettings(
        ENABLE_GENERIC_FALLBACK=False,
        ENABLE_SYNTHETIC_FALLBACK=False,
    ))
    result = extractor.extract("nothing here")

    assert result.parameters == ()
    assert not result.is_synthetic


def test_custom_dictionary():
    extractor = ParameterExtractor(dictionary=[
        ParameterDefinition("ferritin", "ng/mL", "20-250", "Iron Studies"),
    ])
    params = extractor.extract("Ferritin: 300").parameters

    assert [(p.name, p.status, p.category) for p in params] == [
        ("Ferritin", ParameterStatus.HIGH, "Iron Studies"),
    ]


def test_invalid_dictionary_rejected():
    with pytest.raises(DictionaryError):
        ParameterExtractor(dictionary=[
            ParameterDefinition("ferritin", "ng/mL", "20-250", "Other"),
            ParameterDefinition("FERRITIN", "ng/mL", "20-250", "Other"),
        ])


def test_extract_parameters_convenience():
    params = extract_parameters("Glucose: 92 Hemoglobin: 14")

    assert [p.name for p in params] == ["Hemoglobin", "Glucose"]
    assert all(p.status == ParameterStatus.NORMAL for p in params)


def test_potassium_alias_reads_unit_prefix(extractor):
    """The one-letter alias "k" also matches the K of a K/uL unit"""
    params = extractor.extract("WBC 7.2 K/uL").parameters

    assert [(p.name, p.value, p.status) for p in params] == [
        ("White Blood Cells", "7.2", ParameterStatus.NORMAL),
        ("Potassium", "7.2", ParameterStatus.CRITICAL),
    ]
