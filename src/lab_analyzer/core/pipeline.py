# ============================================================================
# src/lab_analyzer/core/pipeline.py
# ============================================================================
"""
Report Pipeline

normalize -> extract (dictionary / generic / synthetic) -> classify -> insights

Wraps the two output lists with an id, filename and timestamp so the
upload workflow can persist them. Storage is the caller's job.

Usage:
    from lab_analyzer.core.pipeline import analyze_report

    report = analyze_report(ocr_text, "cbc_scan.png")
    report.parameters, report.insights
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from .context.enums import ExtractionSource
from .context.report import ClassifiedReport
from ..enrichers.insight_generator import generate_insights
from ..processors.lab.extractor import ParameterExtractor, get_extractor

logger = logging.getLogger(__name__)

_SOURCE_NOTES = {
    ExtractionSource.GENERIC: (
        "No known parameters recognised; values come from a generic label scan "
        "and have no reference range."
    ),
    ExtractionSource.SYNTHETIC: (
        "No values could be read from the document; the parameters shown are "
        "demonstration data."
    ),
}


def analyze_report(
    text: Optional[str],
    filename: str,
    *,
    now: Optional[datetime] = None,
    seed: Optional[int] = None,
    extractor: Optional[ParameterExtractor] = None
) -> ClassifiedReport:
    """
    Build a classified report from OCR text.

    Args:
        text: OCR text of the scanned report
        filename: Source file name, stored as-is
        now: Report timestamp (defaults to current UTC time)
        seed: Seed for the synthetic tier
        extractor: Custom extractor (defaults to the shared one)
    """
    extractor = extractor or get_extractor()
    result = extractor.extract(text, seed=seed)
    parameters = list(result.parameters)

    report = ClassifiedReport(
        report_id=uuid4().hex,
        filename=filename,
        created_at=now or datetime.now(timezone.utc),
        parameters=parameters,
        insights=generate_insights(parameters),
        extraction_source=result.source,
        report_type=extractor.settings.REPORT_TYPE,
    )

    note = _SOURCE_NOTES.get(result.source)
    if note:
        report.notes.append(note)

    abnormal = sum(1 for p in parameters if p.is_abnormal)
    logger.info(
        f"Report {report.report_id} for {filename}: {len(parameters)} parameters "
        f"({result.source.value}, {abnormal} abnormal), {len(report.insights)} insights"
    )
    return report
