# src/lab_analyzer/processors/fallback/synthetic.py
"""
Synthetic Fallback - demo parameter set

Last tier, used when neither the dictionary nor the generic scan found
anything, so downstream rendering always has something to show.

The three values are NOT read from the document. They are baselines
jittered by a seed in 0..999:

    variance    = seed / 1000 * 0.2 - 0.1       (-10% .. +10%)
    hemoglobin  = 13.2 * (1 + variance)         one decimal
    glucose     = 95 * (1 + 2 * variance)       rounded
    cholesterol = 200 * (1 + 1.5 * variance)    rounded

Every generated parameter is tagged ExtractionSource.SYNTHETIC.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..lab.utils.parsing import round_half_up
from ...config import ExtractionSettings, extraction_settings
from ...core.context.enums import ExtractionSource
from ...core.context.extracted_parameter import ExtractedParameter
from ...validators.range_classifier import RangeClassifier

logger = logging.getLogger(__name__)

SEED_MODULUS = 1000


@dataclass(frozen=True)
class DemoParameter:
    name: str
    baseline: float
    variance_scale: float
    decimals: int
    unit: str
    normal_range: str
    category: str


DEMO_PARAMETERS = (
    DemoParameter("Hemoglobin", 13.2, 1.0, 1, "g/dL", "12.0-15.5", "Blood Count"),
    DemoParameter("Glucose", 95, 2.0, 0, "mg/dL", "70-100", "Metabolic"),
    DemoParameter("Total Cholesterol", 200, 1.5, 0, "mg/dL", "<200", "Lipid Profile"),
)


def clock_seed() -> int:
    """Wall-clock milliseconds modulo 1000."""
    return int(time.time() * 1000) % SEED_MODULUS


class SyntheticFallbackGenerator:
    """
    Generate the demo set from an injectable seed.

    Seed precedence: explicit argument, EXTRACTION_SYNTHETIC_SEED setting,
    then seed_source (wall clock by default).
    """

    def __init__(
        self,
        classifier: RangeClassifier = None,
        seed_source: Callable[[], int] = clock_seed,
        settings: ExtractionSettings = None
    ):
        self.classifier = classifier or RangeClassifier()
        self.seed_source = seed_source
        self.settings = settings or extraction_settings

    def resolve_seed(self, seed: Optional[int] = None) -> int:
        if seed is None:
            seed = self.settings.EXTRACTION_SYNTHETIC_SEED
        if seed is None:
            seed = self.seed_source()
        return seed % SEED_MODULUS

    def generate(self, seed: Optional[int] = None) -> List[ExtractedParameter]:
        resolved = self.resolve_seed(seed)
        variance = (resolved / SEED_MODULUS) * 0.2 - 0.1

        logger.warning(
            f"Generating synthetic demo parameters (seed={resolved}); "
            f"values do not come from the document"
        )

        generated = []
        for demo in DEMO_PARAMETERS:
            raw = demo.baseline + demo.baseline * variance * demo.variance_scale
            if demo.decimals:
                text = f"{raw:.{demo.decimals}f}"
            else:
                text = str(round_half_up(raw))
            numeric = float(text)

            generated.append(ExtractedParameter(
                name=demo.name,
                value=text,
                numeric_value=numeric,
                unit=demo.unit,
                normal_range=demo.normal_range,
                category=demo.category,
                status=self.classifier.classify(numeric, demo.normal_range).status,
                source=ExtractionSource.SYNTHETIC,
            ))

        return generated
