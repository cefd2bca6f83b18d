from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import AnalyzerConfig
from .report import classify
from .types import ClassifiedReport
from .utils import RateLimiter, setup_logging
from .vision import VisionAnalyzer


class PaddyDoc:
    """
    High-level PaddyDoc orchestrator.

    Pipeline:
        leaf image -> Vision Analyzer -> Report Classifier -> ClassifiedReport
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        analyzer: Optional[VisionAnalyzer] = None,
    ) -> None:
        self._config = config or AnalyzerConfig.from_env()
        setup_logging(self._config.log_level)
        self._logger = logging.getLogger(__name__)
        self._analyzer = analyzer

    @property
    def analyzer(self) -> VisionAnalyzer:
        # Built on first use so text-only diagnosis needs no API key.
        if self._analyzer is None:
            self._analyzer = VisionAnalyzer(
                model=self._config.model,
                prompt=self._config.prompt,
                max_tokens=self._config.max_tokens,
                temperature=self._config.temperature,
                limiter=RateLimiter(
                    requests_per_minute=self._config.requests_per_minute,
                    max_retries=self._config.max_retries,
                ),
            )
        return self._analyzer

    def diagnose(self, text: str) -> ClassifiedReport:
        report = classify(text)
        self._logger.info(
            "Diagnosis produced %s report with %d section(s)",
            report.kind,
            len(report.sections),
        )
        return report

    def run(self, image_path: str | Path) -> ClassifiedReport:
        self._logger.info("Analyzing leaf image %s", image_path)
        raw_text = self.analyzer.analyze(image_path)
        return self.diagnose(raw_text)
