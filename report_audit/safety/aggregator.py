"""Counting safe reports across a collection"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from ..config.defaults import SafetyParams
from .models import SafetySummary
from .verifier import SafetyVerifier


def count_safe(reports: Iterable[Sequence[int]], dampener_enabled: bool = False,
               params: Optional[SafetyParams] = None,
               max_workers: Optional[int] = None) -> int:
    """
    Count the reports that are safe.

    Args:
        reports: Reports to check
        dampener_enabled: Allow one level per report to be removed
        params: Step limits; defaults to SafetyParams()
        max_workers: Thread count; falls back to params.max_workers.
            Values above 1 check reports on a thread pool.

    Returns:
        Number of safe reports
    """
    verifier = SafetyVerifier(params)
    workers = max_workers if max_workers is not None else verifier.params.max_workers

    def check(report: Sequence[int]) -> bool:
        return verifier.evaluate(report, dampener_enabled)

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return sum(executor.map(check, reports))

    return sum(1 for report in reports if check(report))


def summarize(reports: Iterable[Sequence[int]],
              params: Optional[SafetyParams] = None) -> SafetySummary:
    """Count safe reports with and without the dampener in one pass."""
    verifier = SafetyVerifier(params)
    total = safe = safe_with_dampener = 0

    for report in reports:
        verdict = verifier.explain(report)
        total += 1
        safe += verdict.safe
        safe_with_dampener += verdict.dampened_safe

    return SafetySummary(total=total, safe=safe, safe_with_dampener=safe_with_dampener)
