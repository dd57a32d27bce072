#!/usr/bin/env python3
"""
Basic Usage Example - Report Audit

This script demonstrates the basic usage of the report audit package with the
puzzle example input. It shows how to:
- Parse location lists and compute distance and similarity
- Parse reports and check them with and without the problem dampener
- Inspect why a single report is unsafe

Run: python examples/basic_usage.py
"""

from report_audit.analysis import compute_similarity_score, compute_total_distance
from report_audit.config import get_default_config
from report_audit.data.parsers import parse_reports, parse_sequence_pair
from report_audit.engine import EvaluationEngine
from report_audit.logging import configure_logging
from report_audit.safety import SafetyVerifier, count_safe

LISTS = """\
3   4
4   3
2   5
1   3
3   9
3   3
"""

REPORTS = """\
7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def demo_lists() -> None:
    print("📏 Location lists")
    pair = parse_sequence_pair(LISTS)
    print(f"   Left:  {pair.left}")
    print(f"   Right: {pair.right}")
    print(f"   Total distance:   {compute_total_distance(pair)}")
    print(f"   Similarity score: {compute_similarity_score(pair)}")


def demo_reports() -> None:
    print("\n🧪 Reports")
    reports = parse_reports(REPORTS)
    verifier = SafetyVerifier()

    for report in reports:
        verdict = verifier.explain(report)
        if verdict.safe:
            status = "safe"
        elif verdict.dampened_safe:
            status = f"safe after removing level {verdict.removal_index}"
        else:
            status = f"unsafe (first bad pair at {verdict.first_violation})"
        print(f"   {' '.join(map(str, report)):<12} {status}")

    print(f"   Safe reports: {count_safe(reports)}")
    print(f"   Safe with dampener: {count_safe(reports, dampener_enabled=True)}")


def demo_engine() -> None:
    print("\n⚙️  Engine")
    engine = EvaluationEngine(get_default_config())
    print(f"   {engine.analyze_lists(LISTS)}")
    print(f"   {engine.audit_reports(REPORTS)}")


def main() -> None:
    configure_logging(level="WARNING")
    demo_lists()
    demo_reports()
    demo_engine()


if __name__ == "__main__":
    main()
