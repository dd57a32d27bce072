#!/usr/bin/env python3
"""Performance benchmark script for the report safety aggregator."""

import random
import sys
import time
from typing import Dict, List

from report_audit.config.defaults import SafetyParams
from report_audit.data.models import ReportCollection
from report_audit.safety.aggregator import count_safe


def generate_reports(count: int, length: int = 8, seed: int = 2) -> ReportCollection:
    """Generate random reports that are mostly near-safe."""
    rng = random.Random(seed)
    reports = []
    for _ in range(count):
        level = rng.randint(20, 80)
        sign = rng.choice((1, -1))
        levels = [level]
        for _ in range(length - 1):
            step = rng.choice((1, 2, 3, 3, 4, 0, -1))
            level = max(0, level + sign * step)
            levels.append(level)
        reports.append(levels)
    return ReportCollection.from_lists(reports)


def benchmark_count_safe(reports: ReportCollection, workers: int) -> Dict[str, float]:
    """Time both counts over a collection."""
    params = SafetyParams(max_workers=workers)

    start_time = time.time()
    safe = count_safe(reports, dampener_enabled=False, params=params)
    dampened = count_safe(reports, dampener_enabled=True, params=params)
    total_time = time.time() - start_time

    return {
        "total_time": total_time,
        "reports_per_second": 2 * len(reports) / total_time if total_time else float("inf"),
        "safe": safe,
        "safe_with_dampener": dampened,
    }


def main(argv: List[str] = None) -> int:
    """Main benchmark function."""
    print("⚡ Report Audit Performance Benchmark")
    print("=" * 40)

    test_sizes = [1000, 10000, 50000]

    for size in test_sizes:
        reports = generate_reports(size)
        for workers in (1, 4):
            results = benchmark_count_safe(reports, workers)
            print(f"\n📊 {size} reports, {workers} worker(s):")
            print(f"   Total time: {results['total_time']:.3f}s")
            print(f"   Reports/second: {results['reports_per_second']:.1f}")
            print(f"   Safe: {results['safe']}  with dampener: {results['safe_with_dampener']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
