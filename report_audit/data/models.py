"""
Canonical data models for parsed puzzle input.

This module defines immutable data structures that hold validated integer
sequences after parsing. Nothing downstream mutates them.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ..errors import LengthMismatchError

IntegerSequence = tuple[int, ...]


@dataclass(frozen=True)
class SequencePair:
    """Left and right location-id lists read together from one input."""
    left: IntegerSequence
    right: IntegerSequence

    def __post_init__(self):
        """Freeze inputs into tuples and enforce equal lengths."""
        object.__setattr__(self, "left", tuple(self.left))
        object.__setattr__(self, "right", tuple(self.right))
        if len(self.left) != len(self.right):
            raise LengthMismatchError(
                f"Left list has {len(self.left)} values but right list has {len(self.right)}",
                left_length=len(self.left),
                right_length=len(self.right),
            )

    def __len__(self) -> int:
        return len(self.left)


@dataclass(frozen=True)
class ReportCollection:
    """Ordered collection of reports, each an IntegerSequence of levels."""
    reports: tuple[IntegerSequence, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "reports", tuple(tuple(r) for r in self.reports))

    @classmethod
    def from_lists(cls, reports: Iterable[Iterable[int]]) -> "ReportCollection":
        """Build a collection from any iterable of level iterables."""
        return cls(reports=tuple(tuple(r) for r in reports))

    def __len__(self) -> int:
        return len(self.reports)

    def __iter__(self) -> Iterator[IntegerSequence]:
        return iter(self.reports)

    def __getitem__(self, index: int) -> IntegerSequence:
        return self.reports[index]
