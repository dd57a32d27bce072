"""Default configuration parameters for report auditing."""

from dataclasses import dataclass

U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class SafetyParams:
    """Report safety rule parameters."""
    min_step: int = 1                 # Smallest allowed step between levels
    max_step: int = 3                 # Largest allowed step between levels
    max_workers: int = 1              # >1 evaluates reports on a thread pool


@dataclass(frozen=True)
class ParserParams:
    """Input text parsing parameters."""
    skip_blank_lines: bool = True     # False turns blank lines into empty reports
    max_value: int = U32_MAX          # Largest accepted level value


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    safety: SafetyParams
    parser: ParserParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        safety=SafetyParams(),
        parser=ParserParams(),
        logging=LoggingParams(),
    )
