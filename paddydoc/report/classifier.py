"""
Report classifier.

Maps a raw vision-model reply onto exactly one of the report variants.
Rules are checked in a fixed order and the first match wins:

1. error-prefixed text   -> ErrorReport
2. mentions "healthy"    -> HealthyReport (text kept verbatim)
3. anything else         -> StructuredReport built by the segmenter
"""

from __future__ import annotations

import logging

from ..types import ClassifiedReport, ErrorReport, HealthyReport, StructuredReport
from .segmenter import segment

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error analyzing image:"
HEALTHY_MARKER = "healthy"


def classify(text: str) -> ClassifiedReport:
    if text.startswith(ERROR_PREFIX):
        logger.debug("Report classified as error")
        return ErrorReport(message=text[len(ERROR_PREFIX):].strip())

    if HEALTHY_MARKER in text.lower():
        logger.debug("Report classified as healthy")
        return HealthyReport(message=text)

    sections = segment(text)
    logger.debug("Report classified as structured with %d sections", len(sections))
    return StructuredReport(sections=tuple(sections))
