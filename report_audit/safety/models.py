"""
Data models for report safety outcomes.

Direction is derived from a report each time it is evaluated; the verdict
and summary types only carry results out of the verifier and aggregator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Direction(str, Enum):
    """Direction a report's levels must move in."""
    INCREASING = "increasing"
    DECREASING = "decreasing"


@dataclass(frozen=True)
class SafetyVerdict:
    """Full outcome of checking one report."""
    safe: bool                               # Safe without the dampener
    dampened_safe: bool                      # Safe with the dampener
    direction: Optional[Direction]           # None for reports shorter than 2
    first_violation: Optional[int] = None    # Index i of the first bad pair (i, i+1)
    removal_index: Optional[int] = None      # Level whose removal makes the report safe

    @property
    def needs_dampener(self) -> bool:
        """True if only the dampener makes this report safe."""
        return self.dampened_safe and not self.safe


@dataclass(frozen=True)
class SafetySummary:
    """Safe-report counts for a whole collection."""
    total: int
    safe: int
    safe_with_dampener: int

    @property
    def unsafe(self) -> int:
        return self.total - self.safe_with_dampener

    @property
    def rescued_by_dampener(self) -> int:
        return self.safe_with_dampener - self.safe
