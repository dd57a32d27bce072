"""Configuration defaults, loading and validation."""

from .defaults import DefaultConfig, LoggingParams, ParserParams, SafetyParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "SafetyParams",
    "ParserParams",
    "LoggingParams",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
