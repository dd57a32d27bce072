"""Pytest configuration and shared fixtures."""

import pytest

from report_audit.data.models import ReportCollection, SequencePair


EXAMPLE_LISTS = """\
3   4
4   3
2   5
1   3
3   9
3   3
"""

EXAMPLE_REPORTS = """\
7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


@pytest.fixture
def example_lists_text() -> str:
    """Two-column location lists from the puzzle example."""
    return EXAMPLE_LISTS


@pytest.fixture
def example_reports_text() -> str:
    """Six reports from the puzzle example."""
    return EXAMPLE_REPORTS


@pytest.fixture
def example_pair() -> SequencePair:
    """Parsed form of the example location lists."""
    return SequencePair(left=(3, 4, 2, 1, 3, 3), right=(4, 3, 5, 3, 9, 3))


@pytest.fixture
def example_reports() -> ReportCollection:
    """Parsed form of the example reports."""
    return ReportCollection.from_lists([
        [7, 6, 4, 2, 1],
        [1, 2, 7, 8, 9],
        [9, 7, 6, 2, 1],
        [1, 3, 2, 4, 5],
        [8, 6, 4, 4, 1],
        [1, 3, 6, 7, 9],
    ])
