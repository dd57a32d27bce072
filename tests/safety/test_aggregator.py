"""Tests for safe report counting"""

import pytest

from report_audit.config.defaults import SafetyParams
from report_audit.data.models import ReportCollection
from report_audit.safety.aggregator import count_safe, summarize
from report_audit.safety.models import SafetySummary


class TestCountSafe:
    """Test count_safe"""

    def test_example_without_dampener(self, example_reports):
        assert count_safe(example_reports, dampener_enabled=False) == 2

    def test_example_with_dampener(self, example_reports):
        assert count_safe(example_reports, dampener_enabled=True) == 4

    def test_default_is_without_dampener(self, example_reports):
        assert count_safe(example_reports) == 2

    def test_empty_collection(self):
        assert count_safe(ReportCollection()) == 0
        assert count_safe(ReportCollection(), dampener_enabled=True) == 0

    def test_empty_reports_count_as_safe(self):
        reports = ReportCollection.from_lists([[], [1], [3, 3]])
        assert count_safe(reports) == 2
        assert count_safe(reports, dampener_enabled=True) == 3

    def test_calls_do_not_share_state(self, example_reports):
        """Test alternating dampener settings on one collection"""
        results = [count_safe(example_reports, dampener_enabled=flag) for flag in (True, False, True, False)]
        assert results == [4, 2, 4, 2]

    def test_accepts_plain_lists(self):
        assert count_safe([[1, 2, 3], [1, 9]]) == 1

    def test_custom_params(self, example_reports):
        # max_step of 5 also admits 1 2 7 8 9 and 9 7 6 2 1
        assert count_safe(example_reports, params=SafetyParams(max_step=5)) == 4

    @pytest.mark.parametrize("workers", [2, 4])
    @pytest.mark.parametrize("dampener", [False, True])
    def test_thread_pool_matches_sequential(self, example_reports, workers, dampener):
        sequential = count_safe(example_reports, dampener_enabled=dampener, max_workers=1)
        parallel = count_safe(example_reports, dampener_enabled=dampener, max_workers=workers)
        assert parallel == sequential

    def test_workers_taken_from_params(self, example_reports):
        params = SafetyParams(max_workers=3)
        assert count_safe(example_reports, dampener_enabled=True, params=params) == 4


class TestSummarize:
    """Test summarize"""

    def test_example_summary(self, example_reports):
        summary = summarize(example_reports)

        assert summary == SafetySummary(total=6, safe=2, safe_with_dampener=4)
        assert summary.unsafe == 2
        assert summary.rescued_by_dampener == 2

    def test_summary_matches_count_safe(self, example_reports):
        summary = summarize(example_reports)
        assert summary.safe == count_safe(example_reports)
        assert summary.safe_with_dampener == count_safe(example_reports, dampener_enabled=True)

    def test_empty_summary(self):
        assert summarize([]) == SafetySummary(total=0, safe=0, safe_with_dampener=0)
