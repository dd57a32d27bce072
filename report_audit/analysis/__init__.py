"""Distance and similarity analysis over paired location lists"""

from .distance import DistanceAnalyzer, compute_similarity_score, compute_total_distance

__all__ = [
    "DistanceAnalyzer",
    "compute_total_distance",
    "compute_similarity_score",
]
