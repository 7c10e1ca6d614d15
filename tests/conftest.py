# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from datetime import datetime, timezone

from src.lab_analyzer.config import ExtractionSettings
from src.lab_analyzer.core.context import ExtractedParameter, ParameterStatus
from src.lab_analyzer.processors.lab import ParameterExtractor


@pytest.fixture
def sample_lab_text():
    """Sample OCR output from a scanned report"""
    return """
    City Diagnostics Laboratory Report

    Patient: Jane Roe
    Collected: 2024-01-15

    COMPLETE BLOOD COUNT
    Hemoglobin        11.2    g/dL
    Platelets         245

    METABOLIC PANEL
    Glucose :  128  mg/dL
    Creatinine: 0.9 mg/dL

    LIPID PROFILE
    Total Cholesterol  (<200)  : 215
    """


@pytest.fixture
def unknown_lab_text():
    """Text with measurements that are not in the dictionary"""
    return "Ferritin : 85\nLipase 42 U/L"


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def default_settings():
    """Settings with every tier enabled and no fixed seed"""
    return ExtractionSettings(
        ENABLE_GENERIC_FALLBACK=True,
        ENABLE_SYNTHETIC_FALLBACK=True,
        EXTRACTION_SYNTHETIC_SEED=None,
    )


@pytest.fixture
def extractor(default_settings):
    return ParameterExtractor(settings=default_settings)


@pytest.fixture
def make_parameter():
    """Factory for classified parameters"""
    def _make(name, status=ParameterStatus.NORMAL, value="1", category="Other"):
        return ExtractedParameter(
            name=name,
            value=value,
            numeric_value=float(value),
            unit="mg/dL",
            normal_range="Varies",
            category=category,
            status=status,
        )
    return _make
