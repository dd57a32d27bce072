"""
Main evaluation engine coordinator.

Wires the text parsers to the distance analyzer and the safety aggregator,
applying the loaded configuration and logging one summary per run.
"""

from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .analysis.distance import DistanceAnalyzer, DistanceResult
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .data.models import ReportCollection, SequencePair
from .data.parsers import parse_reports, parse_sequence_pair
from .errors import InputQualityError
from .safety.aggregator import count_safe, summarize
from .safety.models import SafetySummary

logger = structlog.get_logger(__name__)


class EvaluationEngine:
    """
    Coordinator for both puzzle analyses.

    Pipelines:
    Location lists → Parser → DistanceAnalyzer → DistanceResult
    Reports → Parser → Aggregator → SafetySummary
    """

    def __init__(self, config: Optional[DefaultConfig] = None) -> None:
        self.config = config or ConfigLoader.create().load()
        self.logger = logger
        self.distance_analyzer = DistanceAnalyzer()

    @classmethod
    def from_config_dir(cls, config_dir: Optional[Union[str, Path]] = None,
                        overrides: Optional[dict[str, Any]] = None) -> "EvaluationEngine":
        """Build an engine from a config directory plus call overrides."""
        loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        return cls(loader.load(overrides))

    def parse_lists(self, text: str) -> SequencePair:
        return parse_sequence_pair(text, max_value=self.config.parser.max_value)

    def parse_reports(self, text: str) -> ReportCollection:
        return parse_reports(
            text,
            skip_blank_lines=self.config.parser.skip_blank_lines,
            max_value=self.config.parser.max_value,
        )

    def analyze_lists(self, text: str) -> DistanceResult:
        """Parse two-column lists and compute distance and similarity."""
        try:
            pair = self.parse_lists(text)
        except InputQualityError as e:
            self.logger.error("Location list parsing failed", error=str(e), **e.context)
            raise

        result = self.distance_analyzer.analyze(pair)

        self.logger.info(
            "Location lists analyzed",
            pair_length=len(pair),
            total_distance=result.total_distance,
            similarity_score=result.similarity_score,
        )
        return result

    def audit_reports(self, text: str) -> SafetySummary:
        """Parse reports and count the safe ones with and without the dampener."""
        try:
            reports = self.parse_reports(text)
        except InputQualityError as e:
            self.logger.error("Report parsing failed", error=str(e), **e.context)
            raise

        return self.audit_collection(reports)

    def audit_collection(self, reports: ReportCollection) -> SafetySummary:
        """
        Count safe reports in an already parsed collection.

        One sequential pass covers both counts. With max_workers above 1 each
        count is mapped over the thread pool instead.
        """
        params = self.config.safety
        if params.max_workers > 1:
            summary = SafetySummary(
                total=len(reports),
                safe=count_safe(reports, dampener_enabled=False, params=params),
                safe_with_dampener=count_safe(reports, dampener_enabled=True, params=params),
            )
        else:
            summary = summarize(reports, params)

        self.logger.info(
            "Reports audited",
            total=summary.total,
            safe=summary.safe,
            safe_with_dampener=summary.safe_with_dampener,
            max_workers=params.max_workers,
        )
        return summary
