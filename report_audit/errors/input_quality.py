"""
Input quality error classifications for puzzle text parsing.

These exceptions describe problems with the raw text handed to the parser.
Parsing aborts on the first one; the verifier and analyzer never see
partially-invalid data.
"""

from typing import Optional, Dict, Any


class InputQualityError(Exception):
    """Base class for problems with the input text."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedInputError(InputQualityError):
    """A token or line is not a base-10 non-negative integer list."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 token: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number
        self.token = token
        self.expected_format = expected_format


class LengthMismatchError(InputQualityError):
    """Left and right lists of a sequence pair differ in length."""

    def __init__(self, message: str, left_length: Optional[int] = None,
                 right_length: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.left_length = left_length
        self.right_length = right_length
