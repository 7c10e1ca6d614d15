# ============================================================================
# src/lab_analyzer/constants/parameter_dictionary.py
# ============================================================================
"""
Parameter Dictionary

Ordered catalog of the clinical parameters the matcher knows about.

ORDER MATTERS: entries are matched, and results emitted, in the order
listed here. Each entry is visited once and the first value found for it
wins, so an alias shared by two entries resolves to whichever comes first.
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

from ..core.context.parameter_definition import ParameterDefinition
from ..utils.exceptions import DictionaryError

logger = logging.getLogger(__name__)


PARAMETER_DICTIONARY: Tuple[ParameterDefinition, ...] = (
    # Blood Count
    ParameterDefinition("hemoglobin", "g/dL", "12.0-15.5", "Blood Count", ("hgb", "hb")),
    ParameterDefinition("hematocrit", "%", "36-44", "Blood Count", ("hct",)),
    ParameterDefinition("white blood cells", "K/µL", "4.5-11.0", "Blood Count", ("wbc", "leukocytes")),
    ParameterDefinition("red blood cells", "M/µL", "4.2-5.4", "Blood Count", ("rbc", "erythrocytes")),
    ParameterDefinition("platelets", "K/µL", "150-400", "Blood Count", ("plt",)),

    # Metabolic
    ParameterDefinition("glucose", "mg/dL", "70-100", "Metabolic", ("blood sugar", "fasting glucose")),

    # Lipid Profile
    ParameterDefinition("total cholesterol", "mg/dL", "<200", "Lipid Profile", ("cholesterol",)),
    ParameterDefinition("hdl cholesterol", "mg/dL", ">40", "Lipid Profile", ("hdl",)),
    ParameterDefinition("ldl cholesterol", "mg/dL", "<100", "Lipid Profile", ("ldl",)),
    ParameterDefinition("triglycerides", "mg/dL", "<150", "Lipid Profile", ("trig",)),

    # Kidney Function
    ParameterDefinition("creatinine", "mg/dL", "0.6-1.2", "Kidney Function", ("creat",)),
    ParameterDefinition("bun", "mg/dL", "7-20", "Kidney Function", ("blood urea nitrogen",)),

    # Liver Function
    ParameterDefinition("alt", "U/L", "7-56", "Liver Function", ("alanine aminotransferase", "sgpt")),
    ParameterDefinition("ast", "U/L", "10-40", "Liver Function", ("aspartate aminotransferase", "sgot")),
    ParameterDefinition("bilirubin", "mg/dL", "0.2-1.2", "Liver Function", ("total bilirubin",)),

    # Thyroid
    ParameterDefinition("tsh", "mIU/L", "0.4-4.0", "Thyroid", ("thyroid stimulating hormone",)),
    ParameterDefinition("t3", "ng/dL", "80-200", "Thyroid", ("triiodothyronine",)),
    ParameterDefinition("t4", "µg/dL", "4.5-12.0", "Thyroid", ("thyroxine",)),

    # Vitamins
    ParameterDefinition("vitamin d", "ng/mL", "30-100", "Vitamins", ("25-hydroxyvitamin d", "vitamin d3")),
    ParameterDefinition("vitamin b12", "pg/mL", "200-900", "Vitamins", ("b12", "cobalamin")),

    # Electrolytes
    ParameterDefinition("sodium", "mEq/L", "136-145", "Electrolytes", ("na",)),
    ParameterDefinition("potassium", "mEq/L", "3.5-5.0", "Electrolytes", ("k",)),
    ParameterDefinition("chloride", "mEq/L", "98-107", "Electrolytes", ("cl",)),
)


def validate_dictionary(
    definitions: Iterable[ParameterDefinition]
) -> Tuple[ParameterDefinition, ...]:
    """
    Check dictionary entries and freeze the order.

    Raises:
        DictionaryError: on an empty dictionary, empty names, or duplicate
            canonical names (compared case-insensitively)

    Malformed range specifications are only logged; those entries classify
    as normal.
    """
    frozen = tuple(definitions)
    if not frozen:
        raise DictionaryError("Parameter dictionary is empty")

    seen = set()
    for definition in frozen:
        key = definition.canonical_name.strip().lower()
        if not key:
            raise DictionaryError("Parameter with empty canonical name")
        if key in seen:
            raise DictionaryError(f"Duplicate canonical name: {definition.canonical_name}")
        seen.add(key)

        if any(not alias.strip() for alias in definition.aliases):
            raise DictionaryError(f"Empty alias for {definition.canonical_name}")

        if definition.range is None:
            logger.warning(
                f"{definition.canonical_name}: unparseable range "
                f"{definition.range_spec!r}, values will classify as normal"
            )

    return frozen


_BY_NAME: Dict[str, ParameterDefinition] = {
    definition.canonical_name: definition
    for definition in validate_dictionary(PARAMETER_DICTIONARY)
}


def get_parameter(name: str) -> Optional[ParameterDefinition]:
    """
    Look up a definition by canonical name or alias (case-insensitive).
    """
    key = name.strip().lower()
    if key in _BY_NAME:
        return _BY_NAME[key]

    for definition in PARAMETER_DICTIONARY:
        if key in (alias.lower() for alias in definition.aliases):
            return definition

    return None
