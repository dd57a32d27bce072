"""Total distance and similarity score calculations"""

from collections import Counter
from dataclasses import dataclass

from ..data.models import SequencePair
from ..errors import LengthMismatchError


def _check_lengths(pair: SequencePair) -> None:
    if len(pair.left) != len(pair.right):
        raise LengthMismatchError(
            f"Cannot compare lists of length {len(pair.left)} and {len(pair.right)}",
            left_length=len(pair.left),
            right_length=len(pair.right),
        )


def compute_total_distance(pair: SequencePair) -> int:
    """
    Calculate the total distance between the two lists.

    Both lists are sorted ascending (as copies) and paired up smallest with
    smallest; the result is the sum of the absolute differences.

    Args:
        pair: Left and right lists of equal length

    Returns:
        Sum of |left[i] - right[i]| over the sorted lists
    """
    _check_lengths(pair)
    left = sorted(pair.left)
    right = sorted(pair.right)
    return sum(abs(a - b) for a, b in zip(left, right))


def compute_similarity_score(pair: SequencePair) -> int:
    """
    Calculate the similarity score of the two lists.

    Each left value contributes itself multiplied by the number of times it
    appears in the right list.
    """
    frequency = Counter(pair.right)
    return sum(value * frequency.get(value, 0) for value in pair.left)


@dataclass(frozen=True)
class DistanceResult:
    """Both figures computed for one sequence pair."""
    total_distance: int
    similarity_score: int


class DistanceAnalyzer:
    """Computes distance and similarity for a sequence pair in one call"""

    def analyze(self, pair: SequencePair) -> DistanceResult:
        return DistanceResult(
            total_distance=compute_total_distance(pair),
            similarity_score=compute_similarity_score(pair),
        )
