"""Tests for the evaluation engine"""

from unittest.mock import patch

import pytest

from report_audit.analysis.distance import DistanceResult
from report_audit.config.defaults import get_default_config
from report_audit.engine import EvaluationEngine
from report_audit.errors import ConfigurationError, MalformedInputError
from report_audit.safety.aggregator import count_safe, summarize
from report_audit.safety.models import SafetySummary


@pytest.fixture
def engine() -> EvaluationEngine:
    return EvaluationEngine(get_default_config())


class TestEvaluationEngine:
    """Test end-to-end engine runs"""

    def test_analyze_example_lists(self, engine, example_lists_text):
        result = engine.analyze_lists(example_lists_text)
        assert result == DistanceResult(total_distance=11, similarity_score=31)

    def test_audit_example_reports(self, engine, example_reports_text):
        summary = engine.audit_reports(example_reports_text)
        assert summary == SafetySummary(total=6, safe=2, safe_with_dampener=4)

    def test_audit_collection(self, engine, example_reports):
        assert engine.audit_collection(example_reports).safe == 2

    def test_blank_lines_skipped(self, engine, example_reports_text):
        text = example_reports_text.replace("\n", "\n\n")
        summary = engine.audit_reports(text)
        assert summary.total == 6

    def test_blank_lines_counted_when_configured(self, tmp_path, example_reports_text):
        engine = EvaluationEngine.from_config_dir(tmp_path, {"parser": {"skip_blank_lines": False}})
        summary = engine.audit_reports("\n" + example_reports_text)

        assert summary == SafetySummary(total=7, safe=3, safe_with_dampener=5)

    def test_max_value_from_config(self, tmp_path):
        engine = EvaluationEngine.from_config_dir(tmp_path, {"parser": {"max_value": 10}})
        with pytest.raises(MalformedInputError):
            engine.audit_reports("1 2 11\n")

    def test_thread_pool_config(self, tmp_path, example_reports_text):
        engine = EvaluationEngine.from_config_dir(tmp_path, {"safety": {"max_workers": 4}})
        summary = engine.audit_reports(example_reports_text)
        assert (summary.safe, summary.safe_with_dampener) == (2, 4)

    def test_invalid_overrides(self, tmp_path):
        with pytest.raises(ConfigurationError):
            EvaluationEngine.from_config_dir(tmp_path, {"safety": {"min_step": -3}})

    def test_default_construction_uses_repository_config(self):
        engine = EvaluationEngine()
        assert engine.config.safety.max_step == 3

    def test_sequential_audit_uses_single_pass(self, engine, example_reports):
        with patch("report_audit.engine.summarize", wraps=summarize) as summarize_spy, \
                patch("report_audit.engine.count_safe", wraps=count_safe) as count_spy:
            summary = engine.audit_collection(example_reports)

        assert summary == SafetySummary(total=6, safe=2, safe_with_dampener=4)
        summarize_spy.assert_called_once()
        count_spy.assert_not_called()

    def test_threaded_audit_counts_on_pool(self, tmp_path, example_reports):
        engine = EvaluationEngine.from_config_dir(tmp_path, {"safety": {"max_workers": 2}})
        with patch("report_audit.engine.count_safe", wraps=count_safe) as count_spy:
            summary = engine.audit_collection(example_reports)

        assert summary == SafetySummary(total=6, safe=2, safe_with_dampener=4)
        assert count_spy.call_count == 2
