"""
Report safety verifier.

A report is safe when its levels are strictly increasing or strictly
decreasing and every step between neighbours is between ``min_step`` and
``max_step`` (1 and 3 by default). The direction is fixed once from the
first two levels and every later pair must follow it.

The problem dampener tolerates one bad level: an unsafe report still counts
as safe if removing any single level leaves a safe report.
"""

from typing import Optional, Sequence

from ..config.defaults import SafetyParams
from ..logging.config import get_verifier_logger, log_safety_decision
from .models import Direction, SafetyVerdict

DEFAULT_MIN_STEP = SafetyParams.min_step
DEFAULT_MAX_STEP = SafetyParams.max_step


def detect_direction(report: Sequence[int]) -> Optional[Direction]:
    """
    Determine the direction a report must follow.

    Increasing if the first level is below the second, otherwise decreasing.
    An equal first pair is classed as decreasing and fails the step check.

    Returns:
        Direction, or None if the report has fewer than 2 levels
    """
    if len(report) < 2:
        return None
    return Direction.INCREASING if report[0] < report[1] else Direction.DECREASING


def _is_safe_step(a: int, b: int, direction: Direction,
                  min_step: int, max_step: int) -> bool:
    if direction is Direction.INCREASING:
        return a < b and min_step <= b - a <= max_step
    return a > b and min_step <= a - b <= max_step


def find_first_violation(report: Sequence[int],
                         min_step: int = DEFAULT_MIN_STEP,
                         max_step: int = DEFAULT_MAX_STEP) -> Optional[int]:
    """
    Find the first pair of levels that breaks the safety rule.

    Returns:
        Index i such that (report[i], report[i + 1]) is the first unsafe
        pair, or None if the report is safe
    """
    direction = detect_direction(report)
    if direction is None:
        return None

    for i in range(len(report) - 1):
        if not _is_safe_step(report[i], report[i + 1], direction, min_step, max_step):
            return i
    return None


def is_safe(report: Sequence[int],
            min_step: int = DEFAULT_MIN_STEP,
            max_step: int = DEFAULT_MAX_STEP) -> bool:
    """Check whether a report is safe without the problem dampener."""
    return find_first_violation(report, min_step, max_step) is None


def find_dampener_removal(report: Sequence[int],
                          min_step: int = DEFAULT_MIN_STEP,
                          max_step: int = DEFAULT_MAX_STEP) -> Optional[int]:
    """
    Find the first level whose removal makes the report safe.

    Every index is tried in order. Removing a level well before the first
    violation (such as one that fixed the direction) can be the only fix.

    Returns:
        Removal index, or None if no single removal yields a safe report
    """
    for i in range(len(report)):
        candidate = tuple(report[:i]) + tuple(report[i + 1:])
        if is_safe(candidate, min_step, max_step):
            return i
    return None


def is_safe_with_dampener(report: Sequence[int],
                          min_step: int = DEFAULT_MIN_STEP,
                          max_step: int = DEFAULT_MAX_STEP) -> bool:
    """Check whether a report is safe, allowing one level to be removed."""
    if is_safe(report, min_step, max_step):
        return True
    return find_dampener_removal(report, min_step, max_step) is not None


class SafetyVerifier:
    """
    Report safety checks bound to one set of step limits.

    Carries no per-report state; the aggregator shares one instance across
    worker threads.
    """

    def __init__(self, params: Optional[SafetyParams] = None):
        self.params = params or SafetyParams()
        self.logger = get_verifier_logger(__name__)

    @property
    def min_step(self) -> int:
        return self.params.min_step

    @property
    def max_step(self) -> int:
        return self.params.max_step

    def is_safe(self, report: Sequence[int]) -> bool:
        return is_safe(report, self.min_step, self.max_step)

    def is_safe_with_dampener(self, report: Sequence[int]) -> bool:
        return is_safe_with_dampener(report, self.min_step, self.max_step)

    def evaluate(self, report: Sequence[int], dampener_enabled: bool = False) -> bool:
        """Check one report with or without the problem dampener."""
        if dampener_enabled:
            return self.is_safe_with_dampener(report)
        return self.is_safe(report)

    def explain(self, report: Sequence[int]) -> SafetyVerdict:
        """
        Check a report and describe why it is or is not safe.

        Args:
            report: Levels to check

        Returns:
            SafetyVerdict with both outcomes, the direction, the first
            violating pair and the dampener removal index where relevant
        """
        first_violation = find_first_violation(report, self.min_step, self.max_step)
        safe = first_violation is None
        removal_index = None
        if not safe:
            removal_index = find_dampener_removal(report, self.min_step, self.max_step)

        verdict = SafetyVerdict(
            safe=safe,
            dampened_safe=safe or removal_index is not None,
            direction=detect_direction(report),
            first_violation=first_violation,
            removal_index=removal_index,
        )

        if not safe:
            log_safety_decision(
                self.logger,
                report,
                safe=verdict.dampened_safe,
                dampened=verdict.needs_dampener,
                first_violation=first_violation,
                removal_index=removal_index,
            )

        return verdict
