#!/usr/bin/env python3
"""Run the location list and report audits over puzzle input files.

Usage:
    python scripts/run_puzzles.py --lists inputs/1.txt --reports inputs/2.txt
    python scripts/run_puzzles.py --reports inputs/2.txt --config config --log-level DEBUG

Prints the total distance and similarity score for ``--lists`` and the
safe report counts for ``--reports``. Exits with status 1 on malformed
input (including bytes that are not UTF-8), an unreadable input file or an
invalid configuration.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from report_audit.engine import EvaluationEngine
from report_audit.errors import ConfigurationError, InputQualityError, MalformedInputError
from report_audit.logging.config import configure_logging


def read_input(path: Path) -> str:
    """Read an input file as UTF-8 text; undecodable bytes are malformed input."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInputError(
            f"{path}: not valid UTF-8 text ({e.reason} at byte {e.start})",
            expected_format="UTF-8 text",
            context={"path": str(path)},
        ) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Report audit puzzle runner")
    parser.add_argument("--lists", type=Path, help="Two-column location list input")
    parser.add_argument("--reports", type=Path, help="One report per line input")
    parser.add_argument("--config", type=Path, default=None, help="Directory holding audit.yaml")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.lists is None and args.reports is None:
        print("Nothing to do: pass --lists and/or --reports", file=sys.stderr)
        return 2

    overrides = {}
    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level.upper()
    if args.json_logs:
        overrides.setdefault("logging", {})["format_json"] = True

    try:
        engine = EvaluationEngine.from_config_dir(args.config, overrides)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(params=engine.config.logging)

    try:
        if args.lists is not None:
            result = engine.analyze_lists(read_input(args.lists))
            print(f"Total distance: {result.total_distance}")
            print(f"Similarity score: {result.similarity_score}")

        if args.reports is not None:
            summary = engine.audit_reports(read_input(args.reports))
            print(f"Safe reports: {summary.safe}")
            print(f"Safe reports with problem dampener: {summary.safe_with_dampener}")
    except InputQualityError as e:
        print(f"Malformed input: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read input: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
