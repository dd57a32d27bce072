"""
Text parsers for converting raw puzzle input into immutable sequences.

Both parsers share one token contract: whitespace-separated, base-10,
non-negative integers no larger than ``max_value``. The first bad token
aborts parsing with a MalformedInputError; no line is ever skipped because
it failed to parse.
"""

import re
from typing import Iterator

import structlog

from ..config.defaults import U32_MAX
from ..errors import LengthMismatchError, MalformedInputError
from .models import IntegerSequence, ReportCollection, SequencePair

logger = structlog.get_logger(__name__)

_TOKEN_RE = re.compile(r"[0-9]+")
_EXPECTED_FORMAT = "base-10 non-negative integer"


def parse_token(token: str, line_number: int, max_value: int = U32_MAX) -> int:
    """
    Parse a single level token.

    Args:
        token: Raw token text, already stripped of whitespace
        line_number: 1-based source line, used for error reporting
        max_value: Largest accepted value

    Returns:
        Parsed integer value

    Raises:
        MalformedInputError: If the token is not a digit string or exceeds max_value
    """
    if not _TOKEN_RE.fullmatch(token):
        raise MalformedInputError(
            f"Line {line_number}: invalid token {token!r}",
            line_number=line_number,
            token=token,
            expected_format=_EXPECTED_FORMAT,
        )

    value = int(token)
    if value > max_value:
        raise MalformedInputError(
            f"Line {line_number}: value {value} exceeds maximum {max_value}",
            line_number=line_number,
            token=token,
            expected_format=f"{_EXPECTED_FORMAT} <= {max_value}",
        )
    return value


def _iter_lines(text: str) -> Iterator[tuple[int, str]]:
    # Records end at \n only; other control characters are token whitespace
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for index, line in enumerate(lines, start=1):
        yield index, line.rstrip("\r")


def parse_line(line: str, line_number: int, max_value: int = U32_MAX) -> IntegerSequence:
    """Parse all tokens on one line into an IntegerSequence."""
    return tuple(parse_token(token, line_number, max_value) for token in line.split())


def parse_sequence_pair(text: str, max_value: int = U32_MAX) -> SequencePair:
    """
    Parse two-column location lists into a SequencePair.

    Tokens alternate between the left and right list, left first, across the
    whole input regardless of how they are spread over lines.

    Raises:
        MalformedInputError: On any invalid token
        LengthMismatchError: If the total token count is odd
    """
    left: list[int] = []
    right: list[int] = []
    to_left = True

    for line_number, line in _iter_lines(text):
        for value in parse_line(line, line_number, max_value):
            (left if to_left else right).append(value)
            to_left = not to_left

    if len(left) != len(right):
        raise LengthMismatchError(
            f"Odd number of values ({len(left) + len(right)}); lists cannot be paired",
            left_length=len(left),
            right_length=len(right),
        )

    logger.debug("Parsed sequence pair", pair_length=len(left))
    return SequencePair(left=tuple(left), right=tuple(right))


def parse_reports(text: str, skip_blank_lines: bool = True,
                  max_value: int = U32_MAX) -> ReportCollection:
    """
    Parse one report per line into a ReportCollection.

    Args:
        text: Raw input text
        skip_blank_lines: Drop empty and whitespace-only lines. When False
            each such line becomes a zero-length report.
        max_value: Largest accepted level value

    Raises:
        MalformedInputError: On any invalid token
    """
    reports = []
    skipped = 0

    for line_number, line in _iter_lines(text):
        if skip_blank_lines and not line.strip():
            skipped += 1
            continue
        reports.append(parse_line(line, line_number, max_value))

    logger.debug("Parsed reports", report_count=len(reports), blank_lines_skipped=skipped)
    return ReportCollection(reports=tuple(reports))
