# src/lab_analyzer/processors/lab/extractor.py
"""
Parameter Extractor - OCR text to classified health parameters

Strategy (first tier that yields anything wins):
1. Dictionary matcher: known parameters, aliases, reference ranges
2. Generic fallback: loose "label : number [unit]" pairs, status normal
3. Synthetic fallback: seeded demo set so the caller is never empty-handed

Dictionary and synthetic values are classified against their ranges.
The tier used is recorded on the result and on every parameter.

Never raises for any input text.
"""

import logging
from typing import Iterable, List, Optional

from .matcher import DictionaryMatcher, ValueMatch
from ..fallback.generic import GenericFallbackMatcher
from ..fallback.synthetic import SyntheticFallbackGenerator
from ...config import ExtractionSettings, extraction_settings
from ...constants.parameter_dictionary import PARAMETER_DICTIONARY, validate_dictionary
from ...core.context.enums import ExtractionSource
from ...core.context.extracted_parameter import ExtractedParameter
from ...core.context.parameter_definition import ParameterDefinition
from ...core.context.report import ExtractionResult
from ...utils.logging import log_performance
from ...utils.text_normalizer import normalize_text
from ...validators.range_classifier import RangeClassifier

logger = logging.getLogger(__name__)


class ParameterExtractor:
    """
    Run the three extraction tiers over one text.

    Holds only read-only collaborators; safe to share between threads.
    """

    def __init__(
        self,
        dictionary: Optional[Iterable[ParameterDefinition]] = None,
        classifier: RangeClassifier = None,
        synthetic: SyntheticFallbackGenerator = None,
        settings: ExtractionSettings = None
    ):
        self.settings = settings or extraction_settings
        self.dictionary = validate_dictionary(
            PARAMETER_DICTIONARY if dictionary is None else dictionary
        )
        self.classifier = classifier or RangeClassifier()
        self.matcher = DictionaryMatcher(self.dictionary)
        self.generic = GenericFallbackMatcher(self.settings)
        self.synthetic = synthetic or SyntheticFallbackGenerator(
            classifier=self.classifier,
            settings=self.settings,
        )

    @log_performance(logger, "Parameter extraction")
    def extract(self, text: Optional[str], seed: Optional[int] = None) -> ExtractionResult:
        """
        Extract and classify parameters.

        Args:
            text: Raw or already-normalized OCR text
            seed: Seed for the synthetic tier (ignored by the other tiers)
        """
        normalized = normalize_text(text)

        matches = self.matcher.match(normalized)
        if matches:
            parameters = tuple(self._classify(match) for match in matches)
            logger.info(f"Extracted {len(parameters)} dictionary parameters")
            return ExtractionResult(parameters, ExtractionSource.DICTIONARY)

        if self.settings.ENABLE_GENERIC_FALLBACK:
            generic = self.generic.scan(normalized)
            if generic:
                logger.info(
                    f"No dictionary parameters; generic fallback found {len(generic)} values"
                )
                return ExtractionResult(tuple(generic), ExtractionSource.GENERIC)

        if self.settings.ENABLE_SYNTHETIC_FALLBACK:
            logger.warning("No parameters found in text, using synthetic fallback")
            return ExtractionResult(
                tuple(self.synthetic.generate(seed)),
                ExtractionSource.SYNTHETIC,
            )

        logger.warning("No parameters found in text and synthetic fallback is disabled")
        return ExtractionResult((), ExtractionSource.DICTIONARY)

    def _classify(self, match: ValueMatch) -> ExtractedParameter:
        definition = match.definition
        result = self.classifier.classify(match.numeric_value, definition.range)

        return ExtractedParameter(
            name=definition.display_name,
            value=match.value,
            numeric_value=match.numeric_value,
            unit=definition.unit,
            normal_range=definition.range_spec,
            category=definition.category,
            status=result.status,
            source=ExtractionSource.DICTIONARY,
        )


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_extractor = None


def get_extractor() -> ParameterExtractor:
    """Shared extractor over the built-in dictionary."""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = ParameterExtractor()
    return _default_extractor


def extract_parameters(text: Optional[str], seed: Optional[int] = None) -> List[ExtractedParameter]:
    """
    Extract classified parameters from OCR text.

    Returns:
        Parameters in dictionary order; check each .source to tell real
        extraction from the synthetic demo set
    """
    return list(get_extractor().extract(text, seed=seed).parameters)
