"""
Error classification for report auditing.

Separates recoverable input-quality errors (bad tokens, mismatched lists) from
unrecoverable system failures such as an invalid configuration.
"""

from .input_quality import (
    InputQualityError,
    MalformedInputError,
    LengthMismatchError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Input Quality Errors
    "InputQualityError",
    "MalformedInputError",
    "LengthMismatchError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
