"""
Report safety verification.

Decides whether a report's levels change safely, optionally tolerating a
single bad level (the problem dampener), and counts safe reports.
"""

from .aggregator import count_safe, summarize
from .models import Direction, SafetySummary, SafetyVerdict
from .verifier import (
    SafetyVerifier,
    detect_direction,
    find_dampener_removal,
    find_first_violation,
    is_safe,
    is_safe_with_dampener,
)

__all__ = [
    "Direction",
    "SafetyVerdict",
    "SafetySummary",
    "SafetyVerifier",
    "detect_direction",
    "find_first_violation",
    "find_dampener_removal",
    "is_safe",
    "is_safe_with_dampener",
    "count_safe",
    "summarize",
]
