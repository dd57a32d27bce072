"""Tests for distance and similarity calculations"""

import pytest

from report_audit.analysis.distance import (
    DistanceAnalyzer,
    DistanceResult,
    compute_similarity_score,
    compute_total_distance,
)
from report_audit.data.models import SequencePair


class TestTotalDistance:
    """Test total distance calculation"""

    def test_example_distance(self, example_pair):
        assert compute_total_distance(example_pair) == 11

    def test_inputs_not_mutated(self, example_pair):
        """Test sorting works on copies"""
        compute_total_distance(example_pair)
        assert example_pair.left == (3, 4, 2, 1, 3, 3)
        assert example_pair.right == (4, 3, 5, 3, 9, 3)

    def test_identical_lists_have_zero_distance(self):
        pair = SequencePair(left=(5, 1, 3), right=(3, 5, 1))
        assert compute_total_distance(pair) == 0

    def test_empty_lists(self):
        assert compute_total_distance(SequencePair(left=(), right=())) == 0

    def test_distance_is_absolute(self):
        """Test right values smaller than left still add positive distance"""
        pair = SequencePair(left=(10, 20), right=(1, 2))
        assert compute_total_distance(pair) == 27

    def test_large_values(self):
        pair = SequencePair(left=(0,), right=(2**32 - 1,))
        assert compute_total_distance(pair) == 2**32 - 1


class TestSimilarityScore:
    """Test similarity score calculation"""

    def test_example_similarity(self, example_pair):
        assert compute_similarity_score(example_pair) == 31

    def test_no_common_values(self):
        pair = SequencePair(left=(1, 2), right=(3, 4))
        assert compute_similarity_score(pair) == 0

    def test_left_duplicates_each_count(self):
        pair = SequencePair(left=(2, 2, 7), right=(2, 9, 9))
        assert compute_similarity_score(pair) == 4

    @pytest.mark.parametrize("left", [(3, 4, 2, 1, 3, 3), (1, 2, 3, 3, 3, 4), (4, 3, 3, 3, 2, 1)])
    def test_left_order_irrelevant(self, left):
        pair = SequencePair(left=left, right=(4, 3, 5, 3, 9, 3))
        assert compute_similarity_score(pair) == 31

    def test_zero_values_contribute_nothing(self):
        pair = SequencePair(left=(0, 0), right=(0, 0))
        assert compute_similarity_score(pair) == 0


class TestDistanceAnalyzer:
    """Test the combined analyzer"""

    def test_analyze_example(self, example_pair):
        result = DistanceAnalyzer().analyze(example_pair)
        assert result == DistanceResult(total_distance=11, similarity_score=31)
